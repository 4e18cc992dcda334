import json
import os
import tempfile
from pathlib import Path

import pytest

import argsift
from argsift.application import main


class TestE2EClassification:
    """Test end-to-end classification through the public API"""

    @pytest.mark.parametrize(
        "args,params,mode,expected",
        [
            (
                ["-v", "-v"],
                [],
                argsift.PREFER_FLAG_FOR_UNREG_OPTION,
                {"positionals": [], "flags": {"v": 2}, "params": {}},
            ),
            (
                ["--name", "Bob"],
                [],
                argsift.PREFER_FLAG_FOR_UNREG_OPTION,
                {"positionals": ["Bob"], "flags": {"name": 1}, "params": {}},
            ),
            (
                ["--name", "Bob"],
                [],
                argsift.PREFER_PARAM_FOR_UNREG_OPTION,
                {"positionals": [], "flags": {}, "params": {"name": "Bob"}},
            ),
            (
                ["--name=Bob"],
                [],
                argsift.PREFER_FLAG_FOR_UNREG_OPTION,
                {"positionals": [], "flags": {}, "params": {"name": "Bob"}},
            ),
            (
                ["--name=Bob"],
                [],
                argsift.NO_SPLIT_ON_EQUALSIGN,
                {"positionals": [], "flags": {"name=Bob": 1}, "params": {}},
            ),
            (
                ["-abc"],
                [],
                argsift.SINGLE_DASH_IS_MULTIFLAG,
                {"positionals": [], "flags": {"a": 1, "b": 1, "c": 1}, "params": {}},
            ),
            (
                ["-xvf", "file.txt"],
                ["f"],
                argsift.SINGLE_DASH_IS_MULTIFLAG,
                {
                    "positionals": [],
                    "flags": {"x": 1, "v": 1},
                    "params": {"f": "file.txt"},
                },
            ),
            (
                ["-3.5", "-2"],
                [],
                argsift.PREFER_PARAM_FOR_UNREG_OPTION,
                {"positionals": ["-3.5", "-2"], "flags": {}, "params": {}},
            ),
            (
                [],
                [],
                argsift.PREFER_FLAG_FOR_UNREG_OPTION,
                {"positionals": [], "flags": {}, "params": {}},
            ),
        ],
    )
    def test_e2e_classification(self, args, params, mode, expected):
        assert argsift.parse(args, params, mode).to_dict() == expected

    def test_e2e_typed_accessors(self):
        parser = argsift.Parser(["-o", "--level"])
        result = parser.parse(
            ["compress", "-o", "out.gz", "--level", "9", "-v", "in.txt", "-0.5"]
        )

        assert list(result) == ["compress", "in.txt", "-0.5"]
        assert result(["o", "output"]).as_(Path) == Path("out.gz")
        assert result("level", 6).as_(int) == 9
        assert result("threads", 4).as_(int) == 4
        assert result(2).as_(float) == -0.5
        assert result["v"]
        assert result(3).failed
        with pytest.raises(argsift.MissingValueError):
            result("threads").as_(int)


class TestE2ECommandLine:
    """Test end-to-end runs of the argsift command"""

    def test_e2e_config_from_xdg_home(self, mocker, monkeypatch, capsys):
        config_content = "# tar style\nmode=multiflag\nparams=f\n"

        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "argsift.conf"
            config_path.write_text(config_content)
            monkeypatch.setenv("XDG_CONFIG_HOME", temp_dir)

            mocker.patch(
                "sys.argv", ["argsift", "--json", "--", "-czf", "backup.tgz", "src"]
            )
            result = main()

        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "positionals": ["src"],
            "flags": {"c": 1, "z": 1},
            "params": {"f": "backup.tgz"},
        }

    def test_e2e_invalid_config(self, mocker, monkeypatch, caplog):
        with tempfile.NamedTemporaryFile(
            mode="w", delete=False, suffix=".conf"
        ) as config_file:
            config_file.write("mode=prefer_flag,prefer_param\n")
            config_path = Path(config_file.name)

        try:
            mocker.patch(
                "argsift.config_manager.ConfigManager.find_config_file",
                return_value=config_path,
            )
            mocker.patch("sys.argv", ["argsift", "--", "x"])

            assert main() == 1
            assert "mutually exclusive" in caplog.text
        finally:
            os.unlink(config_path)
