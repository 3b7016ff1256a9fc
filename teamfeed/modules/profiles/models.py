# Supabase table: profiles
# This file documents the expected database schema
# Actual lookups are handled via the FeedStore in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id)
- team_id: uuid (foreign key to teams.id, not null after provisioning)

Provisioning: an AFTER INSERT trigger on auth.users creates one teams row and
one profiles row for every new account. There is a short window right after
signup where the profile does not exist yet; lookups report ProfileNotFound.
"""
