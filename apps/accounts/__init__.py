"""
Accounts App - Identity Registry

Registered office members, PIN login with forced reset on first use, and the
administrator login that issues the admin session token.
"""
