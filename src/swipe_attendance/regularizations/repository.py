from __future__ import annotations

from typing import Protocol, Sequence

from .model import Regularization


class RegularizationRepository(Protocol):
    def get_for_employee(self, employee_id: int) -> Sequence[Regularization]:
        raise NotImplementedError
