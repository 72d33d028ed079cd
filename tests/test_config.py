"""Tests for cohesion_lens.config."""

import pytest

from cohesion_lens.config import AnalysisConfig, load_config
from cohesion_lens.exceptions import ConfigurationError, InvalidConfigError
from cohesion_lens.metrics.parameters import ParameterSet
from cohesion_lens.metrics.registry import Metric


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """No user or project config files and no COHESION_* variables."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for field_name in AnalysisConfig.__dataclass_fields__:
        monkeypatch.delenv(f"COHESION_{field_name.upper()}", raising=False)
    return project


class TestAnalysisConfig:
    """Defaults and validation."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.selected_metrics == tuple(Metric)
        assert config.workers is None
        assert config.verbosity == "normal"
        assert config.output_format == "rich"

    def test_unknown_metric(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            AnalysisConfig(metrics=("LCOM", "XYZ"))
        assert exc_info.value.key == "metrics"

    def test_empty_metrics(self):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(metrics=())

    def test_bad_workers(self):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(workers=0)

    def test_bad_output_format(self):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(output_format="xml")

    def test_parameters_for_parameterless_metric_rejected(self):
        with pytest.raises(InvalidConfigError, match="TCC"):
            AnalysisConfig(metric_parameters={"TCC": {"include_ctors": True}})

    def test_unknown_parameter_rejected(self):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(metric_parameters={"LCOM": {"include_abstract": True}})


class TestParametersFor:
    """Per-metric ParameterSet resolution."""

    def test_run_wide_flags(self):
        config = AnalysisConfig(include_static=True)
        assert config.parameters_for(Metric.LCOM) == ParameterSet(include_static=True)

    def test_parameterless_metric_gets_nothing(self):
        config = AnalysisConfig(include_static=True)
        assert config.parameters_for(Metric.TCC).is_empty

    def test_per_metric_override(self):
        config = AnalysisConfig(
            include_ctors=False,
            include_private=True,
            metric_parameters={"LCOM4": {"include_ctors": True}},
        )
        assert config.parameters_for(Metric.LCOM4) == ParameterSet(
            include_ctors=True, include_private=True
        )
        assert config.parameters_for(Metric.LCOM3) == ParameterSet(
            include_ctors=False, include_private=True
        )

    def test_parameter_map_covers_selection(self):
        config = AnalysisConfig(metrics=("LCOM", "TCC"))
        assert set(config.parameter_map()) == {Metric.LCOM, Metric.TCC}


class TestLoadConfig:
    """Merging files, environment and overrides."""

    def test_defaults_without_sources(self):
        assert load_config() == AnalysisConfig()

    def test_project_file(self, isolated_environment):
        (isolated_environment / "cohesion-lens.toml").write_text(
            'metrics = ["LCOM4", "TCC"]\n'
            "include_private = true\n"
            "workers = 2\n"
            "\n"
            "[parameters.LCOM4]\n"
            "include_ctors = true\n"
        )
        config = load_config()
        assert config.selected_metrics == (Metric.LCOM4, Metric.TCC)
        assert config.workers == 2
        assert config.parameters_for(Metric.LCOM4) == ParameterSet(
            include_ctors=True, include_private=True
        )

    def test_explicit_file_beats_project_file(self, isolated_environment, tmp_path):
        (isolated_environment / "cohesion-lens.toml").write_text("workers = 2\n")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("workers = 8\n")
        assert load_config(config_file=explicit).workers == 8

    def test_global_file(self, tmp_path):
        (tmp_path / "home" / ".cohesion-lens.toml").write_text('output_format = "json"\n')
        assert load_config().output_format == "json"

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("COHESION_METRICS", "LCOM, TCC")
        monkeypatch.setenv("COHESION_WORKERS", "3")
        monkeypatch.setenv("COHESION_INCLUDE_CTORS", "yes")
        config = load_config()
        assert config.metrics == ("LCOM", "TCC")
        assert config.workers == 3
        assert config.include_ctors is True

    def test_bad_env_bool(self, monkeypatch):
        monkeypatch.setenv("COHESION_INCLUDE_STATIC", "maybe")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "COHESION_INCLUDE_STATIC"

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("COHESION_WORKERS", "3")
        assert load_config(workers=5).workers == 5

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("COHESION_WORKERS", "3")
        assert load_config(workers=None).workers == 3

    def test_verbose_and_quiet(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("workers = = 2\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "unknown.toml"
        path.write_text("colour = true\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(config_file=path)
