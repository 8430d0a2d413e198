import numpy as np
import pytest

from team_mixer.config import Config, ConfigurationError, TeamOptions, load_config


class TestTeamOptions:
    def test_team_count(self):
        assert TeamOptions(team_count=3).team_count == 3

    def test_team_size(self):
        assert TeamOptions(team_size=2).team_size == 2

    @pytest.mark.parametrize(
        "kwargs",
        [
            {},
            {"team_count": 2, "team_size": 2},
            {"team_count": 0},
            {"team_size": -1},
            {"team_count": 2.0},
            {"team_size": True},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            TeamOptions(**kwargs)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            TeamOptions()

    def test_from_key(self):
        assert TeamOptions.from_key("teamCount_3") == TeamOptions(team_count=3)
        assert TeamOptions.from_key("teamSize_4") == TeamOptions(team_size=4)

    @pytest.mark.parametrize("key", ["teamCount", "teamCount_x", "teamColor_2", "teamSize_0"])
    def test_from_key_invalid(self, key):
        with pytest.raises(ConfigurationError):
            TeamOptions.from_key(key)


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.history_limit == 5
        assert config.attempts == 10
        assert config.recency_step == 2

    @pytest.mark.parametrize("field", ["history_limit", "attempts", "recency_step"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ConfigurationError):
            Config(**{field: 0})

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("history_limit: 3\nattempts: 25\nhistory_path: data/h.json\n", encoding="utf-8")
        config = load_config(path)
        assert config == Config(history_limit=3, attempts=25, history_path="data/h.json")

    def test_load_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == Config()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("history_limt: 3\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("history_limit: [1,\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "absent.yaml")

    def test_non_string_path_in_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("history_path: 123\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    @pytest.mark.parametrize(
        "kwargs",
        [{"history_path": 123}, {"history_path": ""}, {"spectator_marker": None}, {"attempts": 2.5}],
    )
    def test_wrong_field_types(self, kwargs):
        with pytest.raises(ConfigurationError):
            Config(**kwargs)

    def test_numpy_integers_accepted(self):
        config = Config(attempts=np.int64(20), history_limit=np.int32(3))
        assert config.attempts == 20
        assert type(config.attempts) is int
        assert type(config.history_limit) is int


class TestTeamOptionsIntegral:
    def test_numpy_team_count(self):
        options = TeamOptions(team_count=np.int64(3))
        assert options.team_count == 3
        assert type(options.team_count) is int

    def test_numpy_team_size(self):
        assert TeamOptions(team_size=np.uint8(2)).team_size == 2

    def test_numpy_bool_rejected(self):
        with pytest.raises(ConfigurationError):
            TeamOptions(team_count=np.bool_(True))
