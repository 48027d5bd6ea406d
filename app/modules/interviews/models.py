# Supabase tables: interviews, orders
# Interviews are inserted by the portal; the back office moves them through
# scheduled -> completed -> hired | rejected

"""
Expected Supabase table structure:

interviews:
- id: uuid (primary key, default: gen_random_uuid())
- staff_id: uuid (references staff.id)
- user_id: uuid (references auth.users.id)
- order_id: uuid (nullable, references orders.id)
- scheduled_time: timestamp
- service_type: text
- duration: text
- notes: text (nullable)
- status: text - 'scheduled' on insert
- created_at: timestamp (default: now())

orders:
- id: uuid (primary key)
- order_number: text
- customer_name: text
- selected_staff: jsonb - list of {id, name, role, location, image}
"""

INTERVIEWS_TABLE = "interviews"
INTERVIEW_INITIAL_STATUS = "scheduled"
INTERVIEW_HIRED_STATUS = "hired"
INTERVIEW_LIST_COLUMNS = """
    id,
    status,
    scheduled_time,
    notes,
    order:order_id (
        id,
        order_number,
        customer_name,
        selected_staff
    )
"""
