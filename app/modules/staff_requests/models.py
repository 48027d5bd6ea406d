# Supabase table: staff_selections
# Rows are inserted by the portal; status changes happen in the back office

"""
Expected Supabase table structure:

staff_selections:
- id: uuid (primary key, default: gen_random_uuid())
- staff_id: uuid (references staff.id)
- user_id: uuid (references auth.users.id)
- service_type: text - 'full-time' | 'part-time' | 'contract'
- duration: text - e.g. '1-month', '3-months'
- preferred_start_date: timestamp
- additional_info: text (nullable)
- status: text - 'pending' on insert, then 'approved' | 'rejected'
- created_at: timestamp (default: now())
"""

STAFF_SELECTIONS_TABLE = "staff_selections"
REQUEST_INITIAL_STATUS = "pending"
