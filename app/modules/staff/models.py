# Supabase table: staff
# Read-only from the portal; rows are managed by the agency back office

"""
Expected Supabase table structure:

staff:
- id: uuid (primary key)
- name: text
- role: text
- experience: numeric - years
- salary: numeric - monthly, in Naira
- availability: boolean
- image_url: text (nullable)
- location: text (nullable)
- skills: text[] (nullable)
- status: text - only 'active' rows are listed in the directory
- verified: boolean (nullable)
- phone, email: text (nullable)
- age: integer (nullable)
- gender, marital_status: text (nullable)
- education_background: jsonb (nullable) - free-form
- work_history: jsonb (nullable) - free-form
- created_at: timestamp (default: now())
"""

STAFF_TABLE = "staff"
DIRECTORY_COLUMNS = "id, name, role, experience, salary, availability, image_url, location, skills"
