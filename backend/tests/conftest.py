"""Root conftest: shared test configuration."""

import os

# Ensure tests never read real credentials or send real mail
os.environ.setdefault("FROM_ADDRESS", "Test Site <noreply@test.example>")
os.environ.setdefault("PRIMARY_RECIPIENT", "inbox@test.example")
os.environ.setdefault("RESEND_API_KEY", "re_test_fake_key")
