"""SMS verification gateway backed by Twilio Verify, plus a pricing snapshot endpoint."""

__version__ = "1.0.0"
