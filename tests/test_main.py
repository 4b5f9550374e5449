"""Tests for the command-line entry point."""
import pytest

from cms_menu.main import main


class TestMain:
    """Test the cms-menu command."""

    def test_renders_sample_menu(self, capsys):
        """Test the default run prints the menu and total."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.startswith("=== Menu Principal ===\n")
        assert "[✓] 📦 Produtos ▼" in out
        assert "Total de itens no menu: 8" in out

    def test_find_existing(self, capsys):
        """Test --find reports the found item."""
        main(["--find", "/roupas/camisetas"])
        assert "✓ Item encontrado: Camisetas" in capsys.readouterr().out

    def test_find_missing(self, capsys):
        """Test --find reports a missing item."""
        main(["--find", "/nao-existe"])
        assert "Nenhum item encontrado para /nao-existe" in capsys.readouterr().out

    def test_disable(self, capsys):
        """Test --disable marks the entry inactive in the output."""
        main(["--disable", "Produtos"])
        out = capsys.readouterr().out
        assert "[✗] 📦 Produtos ▼" in out
        assert "[✓] 🏠 Home → /" in out

    def test_config(self, tmp_path, capsys):
        """Test display settings are read from --config."""
        path = tmp_path / "config.yaml"
        path.write_text("display:\n  banner: '== CMS =='\n  indent_width: 0\n", encoding='utf-8')
        main(["--config", str(path)])
        out = capsys.readouterr().out
        assert out.startswith("== CMS ==\n")
        assert "\n[✓]  Camisetas → /roupas/camisetas\n" in out

    def test_missing_config_exits(self, tmp_path):
        """Test an unreadable config exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "missing.yaml")])
        assert exc_info.value.code == 1

    def test_invalid_display_value_exits(self, tmp_path):
        """Test a bad display value exits with status 1."""
        path = tmp_path / "config.yaml"
        path.write_text("display:\n  indent_width: -3\n", encoding='utf-8')
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(path)])
        assert exc_info.value.code == 1

    def test_null_banner_exits(self, tmp_path):
        """Test a null banner in the config exits with status 1."""
        path = tmp_path / "config.yaml"
        path.write_text("display:\n  banner: null\n", encoding='utf-8')
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(path)])
        assert exc_info.value.code == 1
