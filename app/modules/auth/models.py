# Supabase Auth
# Users live in Supabase's auth.users table; the portal keeps no credentials.
# The client row keyed by the same id is the portal's profile (see
# app/modules/profiles/models.py).

"""
Sign-up stores a small metadata blob on the auth user:

user_metadata:
- name: text - full name as typed on the sign-up form
- phone: text

The confirmation email links back to the front end at
{site_url}{EMAIL_CALLBACK_PATH}, which exchanges the code for a session.
"""

EMAIL_CALLBACK_PATH = "/auth/callback"
