# Supabase table: company_details
# Single branding row shown in the portal sidebar

"""
Expected Supabase table structure:

company_details:
- id: uuid (primary key)
- name: text
- email: text
- logo: text - single letter shown in the logo tile
"""

COMPANY_DETAILS_TABLE = "company_details"
