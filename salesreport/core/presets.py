"""
Preset Registry

A preset is a plain function taking a builder and returning it after
a chain of ordinary builder calls. Presets never touch builder state
directly, so anything they set can be overridden afterwards.
"""

from typing import Callable, Dict, List

PRESET_CONFIDENTIAL_PDF = "confidential_pdf"


class PresetRegistry:
    def __init__(self):
        self._presets: Dict[str, Callable] = {}

    def register(self, name: str, preset: Callable):
        self._presets[name] = preset

    def get(self, name: str) -> Callable:
        try:
            return self._presets[name]
        except KeyError:
            raise KeyError(
                f"Unknown preset '{name}'. Available: {self.list_presets()}"
            ) from None

    def list_presets(self) -> List[str]:
        return sorted(self._presets)


registry = PresetRegistry()


def register_preset(name: str):
    """Decorator registering a preset function under ``name``."""

    def decorator(func):
        registry.register(name, func)
        return func

    return decorator


def get_preset(name: str) -> Callable:
    return registry.get(name)


def list_presets() -> List[str]:
    return registry.list_presets()


# -------------------------------------------------
# BUILT-IN PRESETS
# -------------------------------------------------
@register_preset(PRESET_CONFIDENTIAL_PDF)
def confidential_pdf(builder):
    return (
        builder
        .with_format("PDF")
        .include_header("Relatório de Vendas")
        .include_footer("Confidencial")
        .with_watermark("Confidencial")
        .with_company_logo("logo.png")
        .page("A4", "Portrait")
        .include_page_numbers()
    )
