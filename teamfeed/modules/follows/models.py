# Supabase table: team_follows
# This file documents the expected database schema
# Actual operations are handled via the FeedStore in service.py

"""
Expected Supabase table structure:

team_follows:
- follower_id: uuid (foreign key to teams.id, not null)
- following_id: uuid (foreign key to teams.id, not null)
- primary key / unique constraint on (follower_id, following_id)
- check constraint follower_id <> following_id
- created_at: timestamp (default: now())

A duplicate insert fails with Postgres error 23505, reported as AlreadyFollowing.
"""
