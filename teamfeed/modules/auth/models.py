# Supabase Auth
# This module uses Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - User registration (auth.users table)
# - User login and session management
# - JWT token generation and validation
# - OAuth code exchange

"""
Supabase Auth provides:
- auth.sign_up() - Register new users
- auth.sign_in_with_password() - Authenticate users
- auth.exchange_code_for_session() - Finish an OAuth login
- auth.get_user() - Get current user from JWT token
- auth.admin.sign_out() - Revoke a user's sessions

Signing up fires the on_auth_user_created trigger, which creates the user's
team (teams) and binds it to the account (profiles). See profiles/models.py.
"""
