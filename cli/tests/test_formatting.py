from twitch_cli.formatting import format_expires_in


def test_format_expires_in() -> None:
    assert format_expires_in(None) == "-"
    assert format_expires_in(0) == "0s"
    assert format_expires_in(42) == "42s"
    assert format_expires_in(125) == "2m05s"
    assert format_expires_in(5000) == "1h23m"
    assert format_expires_in(5233097) == "60d13h"
