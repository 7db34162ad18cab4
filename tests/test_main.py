"""
CLI argument handling and the non-interactive generate path.
Run from project root: python -m pytest tests/ -v
"""
import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rich.console import Console

from brandforge import main as cli
from brandforge.models import BrandInputs
from brandforge.store import BrandHistory, FeatureFlags, MemoryStore


class TestArgs(unittest.TestCase):

    def test_inputs_from_args(self):
        args = cli.parse_args([
            "--name", "Luminary", "--industry", "Technology",
            "--values", "Trust, Quality", "--sliders", "10,20,x,40",
            "--logo-style", "Wordmark",
        ])
        inputs = cli.inputs_from_args(args)
        self.assertEqual(inputs.name, "Luminary")
        self.assertEqual(inputs.values, ["Trust", "Quality"])
        self.assertEqual(inputs.sliders, [10, 20, 40, 50, 50, 50])
        self.assertEqual(inputs.logo_style, "Wordmark")

    def test_non_finite_sliders_ignored(self):
        args = cli.parse_args(["--name", "Nook", "--sliders", "nan,20,inf"])
        self.assertEqual(cli.inputs_from_args(args).sliders, [20, 50, 50, 50, 50, 50])

    def test_no_name_means_wizard(self):
        self.assertIsNone(cli.inputs_from_args(cli.parse_args([])))

    def test_manage_flags(self):
        flags = FeatureFlags(MemoryStore())
        args = cli.parse_args(["--enable-flag", "brand-voice", "--enable-flag", "a11y-checker"])
        self.assertTrue(cli.manage_flags(args, flags))
        self.assertTrue(flags.get("brand-voice"))
        self.assertTrue(flags.get("a11y-checker"))

        args = cli.parse_args(["--disable-flag", "brand-voice", "--name", "Nook"])
        self.assertFalse(cli.manage_flags(args, flags))
        self.assertFalse(flags.get("brand-voice"))

    def test_unknown_flag_rejected(self):
        with self.assertRaises(KeyError):
            cli.manage_flags(cli.parse_args(["--enable-flag", "dark-mode"]), FeatureFlags(MemoryStore()))


class TestGenerate(unittest.TestCase):

    def test_generate_once_records_history_and_session(self):
        store = MemoryStore()
        flags = FeatureFlags(store)
        for name in ("brand-voice", "a11y-checker", "shareable-link", "prompt-editor"):
            flags.set(name, True)
        history = BrandHistory(store)
        inputs = cli.inputs_from_args(cli.parse_args(["--name", "Luminary", "--industry", "SaaS"]))

        kit = cli.generate_once(inputs, history, flags)

        self.assertEqual(len(kit.colors), 5)
        self.assertEqual(history.list()[0]["name"], "Luminary")
        self.assertEqual(history.load_session(), inputs)

    def test_bracketed_text_is_printed_literally(self):
        store = MemoryStore()
        flags = FeatureFlags(store)
        for name in ("brand-voice", "a11y-checker", "shareable-link", "prompt-editor"):
            flags.set(name, True)
        inputs = cli.inputs_from_args(cli.parse_args([
            "--name", "Acme [/]", "--description", "Tools for [/b] makers [bold]",
        ]))
        out = io.StringIO()

        with mock.patch.object(cli, "console", Console(file=out, width=1000)):
            cli.generate_once(inputs, BrandHistory(store), flags)

        text = out.getvalue()
        self.assertIn("Acme [/]", text)
        self.assertIn("Tools for [/b] makers [bold]", text)

    def test_new_brand_gets_its_own_output_dir(self):
        store = MemoryStore()
        flags = FeatureFlags(store)
        flags.set("export-kit", True)
        first = BrandInputs(name="Alpha")
        second = BrandInputs(name="Beta")
        exported = []

        with mock.patch.object(cli, "console", Console(file=io.StringIO())), \
                mock.patch.object(cli.Prompt, "ask", side_effect=["e", "n", "e", "q"]), \
                mock.patch.object(cli, "run_wizard", return_value=second), \
                mock.patch.object(cli, "export_kit", side_effect=lambda kit, d: exported.append((kit.name, d))):
            cli.review_loop(first, BrandHistory(store), flags)

        self.assertEqual(exported, [
            ("Alpha", cli.OUTPUTS_ROOT / "alpha"),
            ("Beta", cli.OUTPUTS_ROOT / "beta"),
        ])

    def test_output_override_is_kept_for_new_brands(self):
        self.assertEqual(cli.output_dir_for(BrandInputs(name="Beta"), "out"), Path("out"))

    def test_main_no_input_exports_tile(self):
        with tempfile.TemporaryDirectory() as tmp:
            store_dir = Path(tmp) / "home"
            out_dir = Path(tmp) / "out"
            with mock.patch.dict("os.environ", {"BRANDFORGE_HOME": str(store_dir)}):
                cli.main(["--enable-flag", "export-kit"])
                cli.main(["--name", "Luminary", "--no-input", "--output", str(out_dir)])
            self.assertTrue((out_dir / "luminary_style_tile.png").exists())
            self.assertTrue((store_dir / "store.json").exists())

    def test_main_no_input_without_name_exits(self):
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.dict("os.environ", {"BRANDFORGE_HOME": tmp}):
                with self.assertRaises(SystemExit):
                    cli.main(["--no-input"])


if __name__ == "__main__":
    unittest.main()
