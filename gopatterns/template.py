"""Template method: generating and sending a one-time password."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Otp(ABC):
    """Sends an OTP through fixed steps that each channel fills in."""

    def gen_and_send_otp(self, otp_length: int) -> str:
        """Generate, cache and send an OTP; return the OTP that was sent."""
        otp = self.gen_random_otp(otp_length)
        self.save_otp_cache(otp)
        message = self.get_message(otp)
        self.send_notification(message)
        return otp

    @abstractmethod
    def gen_random_otp(self, length: int) -> str:
        """Return a new OTP."""

    @abstractmethod
    def save_otp_cache(self, otp: str) -> None:
        """Remember ``otp``."""

    @abstractmethod
    def get_message(self, otp: str) -> str:
        """Return the text that carries ``otp``."""

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver ``message``; raise on failure."""


class Sms(Otp):
    def gen_random_otp(self, length: int) -> str:
        otp = "1234"
        print(f"SMS: generating random otp {otp}")
        return otp

    def save_otp_cache(self, otp: str) -> None:
        print(f"SMS: saving otp: {otp} to cache")

    def get_message(self, otp: str) -> str:
        return "SMS OTP for login is " + otp

    def send_notification(self, message: str) -> None:
        print(f"SMS: sending sms: {message}")


class Email(Otp):
    def gen_random_otp(self, length: int) -> str:
        otp = "1234"
        print(f"EMAIL: generating random otp {otp}")
        return otp

    def save_otp_cache(self, otp: str) -> None:
        print(f"EMAIL: saving otp: {otp} to cache")

    def get_message(self, otp: str) -> str:
        return "EMAIL OTP for login is " + otp

    def send_notification(self, message: str) -> None:
        print(f"EMAIL: sending email: {message}")


def main(argv: list[str] | None = None) -> None:
    Sms().gen_and_send_otp(4)
    print("")
    Email().gen_and_send_otp(4)


if __name__ == "__main__":
    main()