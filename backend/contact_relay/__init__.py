"""Contact Relay: validates contact-form submissions and forwards them through Resend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
