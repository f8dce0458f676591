import json
import logging
from unittest.mock import MagicMock

import pytest

from namespace_demo import cli
from namespace_demo.models import parse_labels

logger = logging.getLogger(__name__)


@pytest.mark.Demo
class TestCli:
    """Command line entry point"""

    def test_missing_kubeconfig_exits_before_any_request(self, tmp_path, monkeypatch, capsys):
        demo_cls = MagicMock()
        monkeypatch.setattr(cli, "NamespaceDemo", demo_cls)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--kubeconfig", str(tmp_path / "missing")])

        assert exc_info.value.code == 1
        assert "Namespace demo failed" in capsys.readouterr().out
        demo_cls.assert_not_called()

    def test_successful_run(self, monkeypatch, core_v1_api, capsys):
        create_client = MagicMock(return_value=core_v1_api)
        monkeypatch.setattr(cli.ClientManager, "create_k8s_client", create_client)

        result = cli.main([
            "--kubeconfig", "/etc/kind.conf",
            "--context", "kind",
            "--name", "cli-namespace",
            "--label", "team=platform",
            "--label", "env=dev",
            "--isolation", "DefaultDeny",
            "--grace-period-seconds", "5",
        ])

        assert result == 0
        create_client.assert_called_once_with("/etc/kind.conf", context="kind")
        body = core_v1_api.create_namespace.call_args.kwargs["body"]
        assert body.metadata.name == "cli-namespace"
        assert body.metadata.labels == {"team": "platform", "env": "dev"}
        assert json.loads(body.metadata.annotations["net.beta.kubernetes.io/network-policy"]) == {
            "ingress": {"isolation": "DefaultDeny"}
        }
        assert core_v1_api.delete_namespace.call_args.kwargs["body"].grace_period_seconds == 5
        assert "Found namespace cli-namespace" in capsys.readouterr().out

    def test_kubeconfig_defaults_to_home(self, monkeypatch, tmp_path, core_v1_api):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setattr(cli.Config, "GRACE_PERIOD_SECONDS", None)
        create_client = MagicMock(return_value=core_v1_api)
        monkeypatch.setattr(cli.ClientManager, "create_k8s_client", create_client)

        assert cli.main([]) == 0

        create_client.assert_called_once_with(str(tmp_path / ".kube" / "config"), context=None)
        assert core_v1_api.delete_namespace.call_args.kwargs["body"].grace_period_seconds is None

    def test_kubeconfig_defaults_to_empty_without_home(self, monkeypatch, core_v1_api):
        monkeypatch.delenv("HOME", raising=False)
        monkeypatch.delenv("USERPROFILE", raising=False)
        create_client = MagicMock(return_value=core_v1_api)
        monkeypatch.setattr(cli.ClientManager, "create_k8s_client", create_client)

        assert cli.main([]) == 0

        create_client.assert_called_once_with("", context=None)

    def test_malformed_kubeconfig_exits_with_failure(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "kubeconfig"
        path.write_text("clusters: [unterminated")
        demo_cls = MagicMock()
        monkeypatch.setattr(cli, "NamespaceDemo", demo_cls)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--kubeconfig", str(path)])

        assert exc_info.value.code == 1
        assert "Invalid kubeconfig file" in capsys.readouterr().out
        demo_cls.assert_not_called()

    def test_grace_period_from_environment(self, monkeypatch):
        monkeypatch.setattr(cli.Config, "GRACE_PERIOD_SECONDS", "7")

        assert cli.build_parser().parse_args([]).grace_period_seconds == 7

    def test_invalid_grace_period_from_environment_is_usage_error(self, monkeypatch, capsys):
        monkeypatch.setattr(cli.Config, "GRACE_PERIOD_SECONDS", "soon")

        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args([])

        assert exc_info.value.code == 2
        assert "Invalid grace period 'soon'" in capsys.readouterr().err

    @pytest.mark.parametrize("name, expected", [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("WARNING", logging.WARNING),
        ("basicConfig", logging.WARNING),
        ("verbose", logging.WARNING),
    ])
    def test_log_level(self, name, expected):
        assert cli.log_level(name) == expected

    @pytest.mark.parametrize("argv", [
        ["--label", "no-equals-sign"],
        ["--label", "=value"],
        ["--grace-period-seconds", "-1"],
        ["--grace-period-seconds", "soon"],
    ])
    def test_invalid_arguments_are_usage_errors(self, argv):
        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args(argv)
        assert exc_info.value.code == 2


def test_parse_labels():
    assert parse_labels(["a=1", "b = 2", "a=3", "empty="]) == {"a": "3", "b": "2", "empty": ""}
