from appenv.runtime.process import Process


def test_get_from_mapping():
    process = Process({"A": "1"})

    assert process.get("A") == "1"
    assert process.get("B") is None
    assert process.get("B", "fallback") == "fallback"
    assert "A" in process
    assert "B" not in process


def test_default_process_reads_live_environment(environ):
    process = Process()
    assert process.get("APPENV_LIVE") is None

    environ["APPENV_LIVE"] = "yes"

    assert process.get("APPENV_LIVE") == "yes"
