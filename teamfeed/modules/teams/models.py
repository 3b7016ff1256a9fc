# Supabase table: teams
# This file documents the expected database schema
# Rows are created by the signup trigger, never by the API

"""
Expected Supabase table structure:

teams:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- created_at: timestamp (default: now())
"""
