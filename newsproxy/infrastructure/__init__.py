"""Infrastructure modules for the news proxy.

Collaborators around the news core:
- Database: Supabase client singleton and user repository
- Auth: JWT verification and user dependencies
- Rate Limiting: Inbound per-client limits
- Health: Dependency health checks
"""
