from typing import Protocol


class VerificationProvider(Protocol):
    def start(self, phone: str, channel: str = "sms") -> str:
        """Request a verification for the destination and return the provider status"""
        ...

    def check(self, phone: str, code: str) -> str:
        """Submit a code for the destination and return the provider status"""
        ...
