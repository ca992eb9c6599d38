from collections.abc import Iterable, Iterator

from .errors import UnsupportedModelError


class ModelCatalog:
    """Fixed set of model identifiers a provider is certified to use.

    Requests naming anything else are rejected rather than sent, so obsolete
    model names never reach the network.
    """

    def __init__(self, models: Iterable[str]):
        self._models = frozenset(models)

    def supports_model(self, model: str) -> bool:
        """Exact membership test."""
        return model in self._models

    def require(self, model: str) -> str:
        """Return ``model`` if supported.

        Raises:
            UnsupportedModelError: If the model is not in the catalog
        """
        if not self.supports_model(model):
            raise UnsupportedModelError(
                f"Unsupported model: {model!r}",
                details={"supported_models": sorted(self._models)},
            )
        return model

    def __contains__(self, model: object) -> bool:
        return isinstance(model, str) and self.supports_model(model)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._models))

    def __len__(self) -> int:
        return len(self._models)


GEMINI_MODELS = ModelCatalog([
    "gemini-2.5-pro",
    "gemini-2.5-flash",
    "gemini-2.0-pro",
    "gemini-2.0-flash",
    "gemini-1.5-pro",
])
