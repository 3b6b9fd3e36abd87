"""
Membership backend for a fitness club.

The interesting part lives in ``fitclub.services.identity_service``: it keeps
login credentials and client/trainer profiles in sync.
"""
