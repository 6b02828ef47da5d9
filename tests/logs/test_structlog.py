import logging

from approxeq.config import load_tolerance_profiles
from approxeq.logs.structlog import ModuleFilter, configure


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


def test_module_filter_allows_everything_when_empty():
    module_filter = ModuleFilter({})
    assert module_filter.filter(_record("anything", logging.DEBUG))


def test_module_filter_applies_first_matching_prefix():
    module_filter = ModuleFilter({"approxeq": "DEBUG", "*": "INFO"})

    assert module_filter.filter(_record("approxeq.config.tolerance", logging.DEBUG))
    assert module_filter.filter(_record("urllib3", logging.INFO))
    assert not module_filter.filter(_record("urllib3", logging.DEBUG))


def test_module_filter_rejects_unlisted_modules():
    module_filter = ModuleFilter({"approxeq": "WARNING"})

    assert not module_filter.filter(_record("approxeq", logging.INFO))
    assert module_filter.filter(_record("approxeq", logging.ERROR))
    assert not module_filter.filter(_record("other", logging.CRITICAL))


def test_module_filter_unknown_level_falls_back_to_info():
    module_filter = ModuleFilter({"*": "VERBOSE"})

    assert not module_filter.filter(_record("approxeq", logging.DEBUG))
    assert module_filter.filter(_record("approxeq", logging.INFO))


def test_configure_writes_log_file(tmp_path):
    log_dir = tmp_path / "logs"

    configure(service_name="approxeq", log_level="debug", log_dir=str(log_dir))

    log_file = log_dir / "approxeq.log"
    assert log_file.is_file()
    assert "Logger initialized" in log_file.read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.DEBUG


def test_configure_without_log_dir_installs_console_only(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    configure(log_level="info")

    root = logging.getLogger()
    assert [type(handler) for handler in root.handlers] == [logging.StreamHandler]
    assert root.level == logging.INFO
    assert list(tmp_path.iterdir()) == []


def test_profile_loading_is_logged_after_configure(tmp_path):
    log_dir = tmp_path / "logs"
    config_file = tmp_path / "tolerances.yaml"
    config_file.write_text("tolerances:\n  money:\n    abs_tol: 0.01\n", encoding="utf-8")

    configure(service_name="approxeq", log_level="INFO", log_dir=str(log_dir))
    load_tolerance_profiles(config_file)

    contents = (log_dir / "approxeq.log").read_text(encoding="utf-8")
    assert "Loaded tolerance profiles" in contents
    assert "component=tolerance_config" in contents
    assert "money" in contents
