import dataclasses
import json
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from upcgen import load_config
from upcgen.barcodegen.exceptions import (
    CodewordsNotSupportedError,
    InputTooLongError,
    InvalidAddOnDataError,
    InvalidCharactersError,
    InvalidInputDataError,
    InvalidUpcEDataError,
    MissingDataError,
    UpcError,
)
from upcgen.barcodegen.upc_generator import UpcGenerator, encode, try_encode
from upcgen.model.enums import HumanReadableLocation, UpcMode
from upcgen.model.symbol import UpcConfig


class TestEncode:
    """End-to-end encode: split -> validate -> pattern -> add-on -> layout."""

    def test_upca_defaults(self) -> None:
        symbol = encode(UpcConfig(content="03600029145"))
        assert symbol.mode is UpcMode.UPCA
        assert symbol.readable == "036000291452"
        assert symbol.check_digit == "2"
        assert symbol.module_total == 95
        assert symbol.add_on_content is None
        assert symbol.equivalent_upca is None
        assert symbol.encode_info == "Check Digit: 2\n"
        assert symbol.width == 107

    def test_upce(self) -> None:
        symbol = encode(UpcConfig(mode=UpcMode.UPCE, content="0123456"))
        assert symbol.readable == "01234565"
        assert symbol.equivalent_upca == "01234500006"
        assert symbol.module_total == 51

    def test_upce_with_ean2(self) -> None:
        symbol = encode(UpcConfig(mode=UpcMode.UPCE, content="0123456+5"))
        assert symbol.add_on_content == "05"
        assert symbol.module_total == 51 + 9 + 20
        assert symbol.texts[-1].text == "05"

    def test_upca_with_ean5(self) -> None:
        symbol = encode(UpcConfig(content="03600029145+52495"))
        assert symbol.add_on_content == "52495"
        assert symbol.module_total == 95 + 9 + 47
        assert symbol.readable == "036000291452"

    def test_three_digit_add_on_text(self) -> None:
        symbol = encode(UpcConfig(content="03600029145+123"))
        assert symbol.add_on_content == "0123"
        assert symbol.module_total == 95 + 9 + 47

    def test_linkage_flag(self) -> None:
        symbol = encode(UpcConfig(content="03600029145", linkage_flag=True))
        assert len(symbol.rectangles) == 34
        assert symbol.rectangles[0].y == 4

    def test_no_text(self) -> None:
        cfg = UpcConfig(
            content="03600029145",
            human_readable_location=HumanReadableLocation.NONE,
        )
        assert encode(cfg).texts == ()

    def test_no_text_from_string_location(self) -> None:
        cfg = UpcConfig(
            content="03600029145",
            human_readable_location="none",  # type: ignore[arg-type]
        )
        assert encode(cfg).texts == ()

    @pytest.mark.parametrize(
        "mode,content,error",
        [
            (UpcMode.UPCA, "", MissingDataError),
            (UpcMode.UPCA, "+12", MissingDataError),
            (UpcMode.UPCE, "", MissingDataError),
            (UpcMode.UPCA, "123456789012", InputTooLongError),
            (UpcMode.UPCE, "01234567", InputTooLongError),
            (UpcMode.UPCA, "12345A", InvalidCharactersError),
            (UpcMode.UPCE, "2345670", InvalidInputDataError),
            (UpcMode.UPCE, "0120453", InvalidUpcEDataError),
            (UpcMode.UPCA, "03600029145+", InvalidAddOnDataError),
            (UpcMode.UPCA, "03600029145+123456", InvalidAddOnDataError),
            (UpcMode.UPCA, "03600029145+1x", InvalidAddOnDataError),
        ],
    )
    def test_errors(self, mode: UpcMode, content: str, error: type) -> None:
        with pytest.raises(error):
            encode(UpcConfig(mode=mode, content=content))

    def test_primary_validated_before_add_on(self) -> None:
        with pytest.raises(InvalidCharactersError):
            encode(UpcConfig(content="12A+xx"))

    def test_result_unaffected_by_later_config(self) -> None:
        cfg = UpcConfig(content="03600029145")
        symbol = encode(cfg)
        encode(cfg.with_mode(UpcMode.UPCE).with_content("0123456"))
        assert symbol.readable == "036000291452"
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.content = "1"  # type: ignore[misc]


class TestTryEncode:
    def test_success(self) -> None:
        result = try_encode(UpcConfig(content="03600029145"))
        assert result.ok
        assert result.error is None
        assert result.unwrap().readable == "036000291452"

    @pytest.mark.parametrize(
        "mode,content,kind",
        [
            (UpcMode.UPCA, "", "MissingData"),
            (UpcMode.UPCA, "123456789012", "InputTooLong"),
            (UpcMode.UPCA, "abc", "InvalidCharacters"),
            (UpcMode.UPCE, "2345670", "InvalidInputData"),
            (UpcMode.UPCE, "0123054", "InvalidUpcEData"),
            (UpcMode.UPCE, "0123456+", "InvalidAddOnData"),
        ],
    )
    def test_failure_kinds(self, mode: UpcMode, content: str, kind: str) -> None:
        result = try_encode(UpcConfig(mode=mode, content=content))
        assert not result.ok
        assert result.symbol is None
        assert result.error_kind == kind
        with pytest.raises(UpcError):
            result.unwrap()


class TestUpcGenerator:
    @pytest.fixture
    def upca_generator(self) -> UpcGenerator:
        return UpcGenerator.create(UpcMode.UPCA, "03600029145")

    def test_init_requires_config(self) -> None:
        with pytest.raises(TypeError, match="UpcConfig"):
            UpcGenerator("03600029145")  # type: ignore[arg-type]

    def test_create(self) -> None:
        gen = UpcGenerator.create(UpcMode.UPCE, "0123456", linkage_flag=True)
        assert gen.config.mode is UpcMode.UPCE
        assert gen.config.linkage_flag is True

    def test_validate(self, upca_generator: UpcGenerator) -> None:
        upca_generator.validate()
        with pytest.raises(InvalidInputDataError):
            UpcGenerator.create(UpcMode.UPCE, "2345670").validate()

    def test_codewords_not_supported(self, upca_generator: UpcGenerator) -> None:
        with pytest.raises(CodewordsNotSupportedError):
            upca_generator.codewords()

    def test_supported_modes(self) -> None:
        assert UpcGenerator.supported_modes() == {UpcMode.UPCA, UpcMode.UPCE}

    def test_render_image_size(self, upca_generator: UpcGenerator) -> None:
        img = upca_generator.render_image({"scale": 2})
        assert isinstance(img, Image.Image)
        assert img.mode == "RGB"
        # 107 modules wide; text baseline 48 + descent 2
        assert img.size == (214, 100)

    def test_render_image_draws_bars(self, upca_generator: UpcGenerator) -> None:
        img = upca_generator.render_image({"scale": 2})
        assert img.getpixel((12, 10)) == (0, 0, 0)  # first guard bar
        assert img.getpixel((14, 10)) == (255, 255, 255)  # following space
        assert img.getpixel((2, 10)) == (255, 255, 255)  # quiet zone

    def test_render_image_without_text(self) -> None:
        gen = UpcGenerator.create(
            UpcMode.UPCE,
            "0123456",
            human_readable_location=HumanReadableLocation.NONE,
        )
        img = gen.render_image({"scale": 1})
        assert img.size == (63, 45)

    def test_render_image_colours(self, upca_generator: UpcGenerator) -> None:
        img = upca_generator.render_image(
            {"scale": 2, "foreground": "red", "background": "yellow"}
        )
        assert img.getpixel((12, 10)) == (255, 0, 0)
        assert img.getpixel((2, 10)) == (255, 255, 0)

    def test_render_image_strict_raises(self) -> None:
        with pytest.raises(InputTooLongError):
            UpcGenerator.create(UpcMode.UPCA, "123456789012").render_image()

    def test_render_image_placeholder_when_not_strict(self) -> None:
        gen = UpcGenerator.create(UpcMode.UPCA, "123456789012")
        img = gen.render_image({"scale": 1}, strict=False)
        assert img.size == (113, 55)
        assert img.getpixel((10, 10)) == (255, 255, 255)

    def test_render_image_uses_config_module_scale(self) -> None:
        gen = UpcGenerator.create(UpcMode.UPCA, "03600029145", module_scale=1)
        assert gen.render_image().size == (107, 50)

    def test_module_scale_from_settings(self, tmp_path: Path) -> None:
        config_path = tmp_path / "upcgen.json"
        config_path.write_text(json.dumps({"module_scale": 1}), encoding="utf-8")
        settings = load_config(config_path)
        cfg = UpcConfig.from_settings(settings, content="03600029145")
        assert UpcGenerator(cfg).render_image().size == (107, 50)

    def test_explicit_scale_overrides_config(self) -> None:
        gen = UpcGenerator.create(UpcMode.UPCA, "03600029145", module_scale=1)
        assert gen.render_image({"scale": 2}).size == (214, 100)

    def test_render_image_bad_scale(self, upca_generator: UpcGenerator) -> None:
        with pytest.raises(ValueError, match="scale"):
            upca_generator.render_image({"scale": 0})

    def test_missing_font_falls_back(self, upca_generator: UpcGenerator) -> None:
        img = upca_generator.render_image(
            {"scale": 2, "font_path": "/nonexistent/font.ttf"}
        )
        assert img.size == (214, 100)

    def test_render_bytes_png(self, upca_generator: UpcGenerator) -> None:
        data = upca_generator.render_bytes({"scale": 1})
        assert data.startswith(b"\x89PNG")
        assert Image.open(BytesIO(data)).size == (107, 50)
