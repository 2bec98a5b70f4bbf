import locale

from chatbot import cli


def test_main_switches_time_formatting_to_user_locale(monkeypatch):
    calls = []
    seen = []

    async def fake_repl(controller):
        seen.append(controller)

    monkeypatch.setattr(cli.locale, "setlocale", lambda category, value=None: calls.append((category, value)))
    monkeypatch.setattr(cli, "repl", fake_repl)

    assert cli.main(["--no-delay"]) == 0
    assert calls == [(locale.LC_TIME, "")]
    assert len(seen) == 1 and seen[0].delay is None


def test_unavailable_locale_keeps_c(monkeypatch):
    def broken(category, value=None):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(cli.locale, "setlocale", broken)
    assert cli.use_user_locale() is False


def test_remote_flag_builds_remote_source():
    controller = cli.build_controller(
        cli.argparse.Namespace(remote="http://gw:3001", provider="gemini", no_delay=False)
    )
    assert controller.source.base_url == "http://gw:3001"
    assert controller.source.provider == "gemini"
    assert controller.delay is None
