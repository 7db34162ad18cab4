"""
Logo image generation with provider fallback. No network: providers are faked
or the SDK / urllib entry points are patched.
Run from project root: python -m pytest tests/ -v
"""
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from brandforge.logo_client import (
    GEMINI_IMAGE_MODELS,
    GeminiImageProvider,
    LogoGenerationError,
    LogoImage,
    OpenAIImageProvider,
    generate_logo_images,
)


class FakeProvider:
    def __init__(self, name, available=True, fail=False, empty=False):
        self.name = name
        self._available = available
        self.fail = fail
        self.empty = empty
        self.prompts = []

    @property
    def available(self):
        return self._available

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise RuntimeError(f"{self.name} is down")
        if self.empty:
            return None
        return LogoImage(provider=self.name, prompt=prompt, data=b"\x89PNG fake")


class TestGenerateLogoImages(unittest.TestCase):

    def test_primary_provider_used_first(self):
        primary, fallback = FakeProvider("primary"), FakeProvider("fallback")
        images = generate_logo_images("a fox mark", n=2, providers=[primary, fallback])
        self.assertEqual([i.provider for i in images], ["primary", "primary"])
        self.assertEqual(primary.prompts, ["a fox mark", "a fox mark (variation 2)"])
        self.assertEqual(fallback.prompts, [])

    def test_falls_back_on_error(self):
        primary, fallback = FakeProvider("primary", fail=True), FakeProvider("fallback")
        with self.assertLogs("brandforge.logo_client", level="WARNING"):
            images = generate_logo_images("a fox mark", providers=[primary, fallback])
        self.assertEqual([i.provider for i in images], ["fallback"])

    def test_falls_back_on_empty_result(self):
        primary, fallback = FakeProvider("primary", empty=True), FakeProvider("fallback")
        images = generate_logo_images("a fox mark", providers=[primary, fallback])
        self.assertEqual(images[0].provider, "fallback")

    def test_unavailable_provider_skipped(self):
        primary, fallback = FakeProvider("primary", available=False), FakeProvider("fallback")
        generate_logo_images("a fox mark", providers=[primary, fallback])
        self.assertEqual(primary.prompts, [])

    def test_all_fail(self):
        providers = [FakeProvider("a", fail=True), FakeProvider("b", fail=True)]
        with self.assertRaises(LogoGenerationError):
            generate_logo_images("a fox mark", n=3, providers=providers)

    def test_no_provider_configured(self):
        with self.assertRaises(LogoGenerationError):
            generate_logo_images("a fox mark", providers=[FakeProvider("a", available=False)])

    def test_empty_prompt(self):
        with self.assertRaises(ValueError):
            generate_logo_images("   ", providers=[FakeProvider("a")])

    def test_variation_count_capped(self):
        images = generate_logo_images("a fox mark", n=9, providers=[FakeProvider("a")])
        self.assertEqual(len(images), 4)

    def test_partial_success_is_returned(self):
        flaky = FakeProvider("flaky")
        calls = {"n": 0}
        original = flaky.generate

        def generate(prompt):
            calls["n"] += 1
            if calls["n"] == 2:
                raise RuntimeError("timeout")
            return original(prompt)

        flaky.generate = generate
        with self.assertLogs("brandforge.logo_client", level="WARNING"):
            images = generate_logo_images("a fox mark", n=3, providers=[flaky])
        self.assertEqual(len(images), 2)


class TestProviders(unittest.TestCase):

    def test_providers_need_keys(self):
        self.assertFalse(GeminiImageProvider(api_key="").available)
        self.assertFalse(OpenAIImageProvider(api_key="").available)
        self.assertTrue(GeminiImageProvider(api_key="k").available)

    def test_openai_returns_url(self):
        payload = json.dumps({"data": [{"url": "https://img.test/1.png"}]}).encode("utf-8")
        resp = mock.MagicMock()
        resp.__enter__.return_value = io.BytesIO(payload)
        with mock.patch("brandforge.logo_client.urllib.request.urlopen", return_value=resp) as urlopen:
            image = OpenAIImageProvider(api_key="sk-test").generate("a fox mark")
        self.assertEqual(image.url, "https://img.test/1.png")
        req = urlopen.call_args[0][0]
        self.assertEqual(req.get_header("Authorization"), "Bearer sk-test")
        self.assertEqual(json.loads(req.data)["model"], "dall-e-3")

    def test_gemini_returns_inline_bytes(self):
        part = mock.MagicMock()
        part.inline_data.data = b"\x89PNG gemini"
        candidate = mock.MagicMock()
        candidate.content.parts = [part]
        response = mock.MagicMock()
        response.candidates = [candidate]

        with mock.patch("brandforge.logo_client.genai.Client") as client_cls:
            client_cls.return_value.models.generate_content.return_value = response
            image = GeminiImageProvider(api_key="g-test").generate("a fox mark")

        self.assertEqual(image.data, b"\x89PNG gemini")
        self.assertEqual(image.provider, "gemini")

    def test_gemini_moves_down_model_ladder(self):
        part = mock.MagicMock()
        part.inline_data.data = b"\x89PNG second"
        candidate = mock.MagicMock()
        candidate.content.parts = [part]
        response = mock.MagicMock()
        response.candidates = [candidate]

        with mock.patch("brandforge.logo_client.genai.Client") as client_cls:
            generate = client_cls.return_value.models.generate_content
            generate.side_effect = [RuntimeError("404 NOT_FOUND: model is not found"), response]
            image = GeminiImageProvider(api_key="g-test").generate("a fox mark")

        self.assertEqual(image.data, b"\x89PNG second")
        models = [c.kwargs["model"] for c in generate.call_args_list]
        self.assertEqual(models, GEMINI_IMAGE_MODELS[:2])

    def test_gemini_other_errors_propagate(self):
        with mock.patch("brandforge.logo_client.genai.Client") as client_cls:
            generate = client_cls.return_value.models.generate_content
            generate.side_effect = RuntimeError("429 quota exceeded")
            with self.assertRaises(RuntimeError):
                GeminiImageProvider(api_key="g-test").generate("a fox mark")
        self.assertEqual(generate.call_count, 1)

    def test_gemini_without_image_part(self):
        part = mock.MagicMock()
        part.inline_data = None
        candidate = mock.MagicMock()
        candidate.content.parts = [part]
        response = mock.MagicMock()
        response.candidates = [candidate]

        with mock.patch("brandforge.logo_client.genai.Client") as client_cls:
            client_cls.return_value.models.generate_content.return_value = response
            self.assertIsNone(GeminiImageProvider(api_key="g-test").generate("a fox mark"))


class TestLogoImageSave(unittest.TestCase):

    def test_save_bytes(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = LogoImage(provider="x", prompt="p", data=b"abc").save(Path(tmp) / "a" / "logo.png")
            self.assertEqual(path.read_bytes(), b"abc")

    def test_save_without_data_or_url(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(LogoGenerationError):
                LogoImage(provider="x", prompt="p").save(Path(tmp) / "logo.png")


if __name__ == "__main__":
    unittest.main()
