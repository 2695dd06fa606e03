"""
Service layer abstraction.

Services encapsulate the SQL for a domain and operate on a connection
pool handed to them by the caller, so API handlers never touch
connections directly.
"""
