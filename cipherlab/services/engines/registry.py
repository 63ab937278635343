from typing import ClassVar, Type

from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.engines.alphabet import ENGLISH, Alphabet
from cipherlab.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Engine classes register themselves at import time. Each registry
    instance builds engines lazily for one alphabet and reuses them.
    """

    _engines: ClassVar[dict[CipherType, Type[CipherEngine]]] = {}

    def __init__(self, alphabet: Alphabet = ENGLISH):
        self.alphabet = alphabet
        self._instances: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Used as a decorator:
            @EngineRegistry.register
            class AffineEngine(CipherEngine):
                ...
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """Registered cipher types, in registration order."""
        return list(cls._engines)

    def get_engine(self, cipher_type: CipherType) -> CipherEngine:
        """
        Engine instance for cipher_type bound to this registry's alphabet.

        Raises:
            LookupError: if no engine is registered for cipher_type
        """
        if cipher_type not in self._instances:
            try:
                engine_class = self._engines[cipher_type]
            except KeyError:
                raise LookupError(f"No engine registered for {cipher_type.value}") from None
            self._instances[cipher_type] = engine_class(self.alphabet)
        return self._instances[cipher_type]

    def get_engines_by_family(self, family: CipherFamily) -> list[CipherEngine]:
        return [
            self.get_engine(cipher_type)
            for cipher_type, engine_class in self._engines.items()
            if engine_class.cipher_family == family
        ]


def _load_engines() -> None:
    """Import engine packages so their classes register."""
    from cipherlab.services.engines import monoalphabetic  # noqa: F401
    from cipherlab.services.engines import polyalphabetic  # noqa: F401
    from cipherlab.services.engines import polygraphic  # noqa: F401


_load_engines()
