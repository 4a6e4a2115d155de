import pytest

from gopatterns.template import Email, Sms, main


class FailingSms(Sms):
    def send_notification(self, message):
        raise ConnectionError(message)


def test_sms_steps(capsys):
    assert Sms().gen_and_send_otp(4) == "1234"
    assert capsys.readouterr().out.splitlines() == [
        "SMS: generating random otp 1234",
        "SMS: saving otp: 1234 to cache",
        "SMS: sending sms: SMS OTP for login is 1234",
    ]


def test_email_steps(capsys):
    assert Email().gen_and_send_otp(4) == "1234"
    assert capsys.readouterr().out.splitlines() == [
        "EMAIL: generating random otp 1234",
        "EMAIL: saving otp: 1234 to cache",
        "EMAIL: sending email: EMAIL OTP for login is 1234",
    ]


@pytest.mark.parametrize("channel, prefix", [(Sms(), "SMS"), (Email(), "EMAIL")])
def test_message_contains_otp(channel, prefix):
    message = channel.get_message("9876")
    assert message.startswith(prefix)
    assert message.endswith("9876")


def test_steps_run_in_order_and_errors_propagate(capsys):
    channel = FailingSms()
    with pytest.raises(ConnectionError, match="SMS OTP for login is 1234"):
        Sms.gen_and_send_otp(channel, 3)
    assert capsys.readouterr().out.splitlines() == [
        "SMS: generating random otp 1234",
        "SMS: saving otp: 1234 to cache",
    ]


def test_main_prints_both_channels(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert lines[3] == ""
    assert lines[0].startswith("SMS:")
    assert lines[4].startswith("EMAIL:")