"""Bus double that can be told to fail at startup."""

from collections.abc import Sequence

from datamodels.bus.local import LocalBus
from datamodels.bus.types import DataElement
from datamodels.core.errors import RegistrationError


class FailingBus(LocalBus):
    """LocalBus that refuses to open or to register, as configured.

    Attributes:
        fail_open: When True, open() raises RegistrationError
        fail_register: When True, register() raises RegistrationError
        closed: Number of close() calls, for test assertions
    """

    def __init__(self, fail_open: bool = False, fail_register: bool = False) -> None:
        super().__init__()
        self.fail_open = fail_open
        self.fail_register = fail_register
        self.closed = 0

    def open(self, component_name: str) -> None:
        if self.fail_open:
            raise RegistrationError("Failed to open rbus: BUS_ERROR")
        super().open(component_name)

    def register(self, elements: Sequence[DataElement]) -> None:
        if self.fail_register:
            raise RegistrationError("Failed to register data elements: BUS_ERROR")
        super().register(elements)

    def close(self) -> None:
        self.closed += 1
        super().close()
