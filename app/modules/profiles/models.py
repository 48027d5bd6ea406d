# Supabase table: client
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

client:
- id: uuid (primary key, references auth.users.id)
- name: text - person name, or company name when entity_type is 'company'
- contact_person_name: text (nullable)
- contact_person_email: text (nullable) - synced from auth.users on creation
- contact_person_phone: text (nullable)
- contact_person_address: text (nullable)
- entity_type: text (nullable) - 'individual' | 'company'
- image_url: text (nullable)
- status: text (default: 'active')
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

A row is created lazily the first time an authenticated user has no client
record. Rows are never deleted by the portal.
"""

CLIENT_TABLE = "client"
