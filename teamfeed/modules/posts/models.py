# Supabase table: posts
# This file documents the expected database schema
# Actual operations are handled via the FeedStore in service.py

"""
Expected Supabase table structure:

posts:
- id: uuid (primary key, default: gen_random_uuid())
- content: text (not null, 1-280 characters, stored trimmed)
- team_id: uuid (foreign key to teams.id, not null)
- created_at: timestamp (default: now())
- index on (created_at desc)

team_id is always taken from the author's profiles row, never from the request.
"""
