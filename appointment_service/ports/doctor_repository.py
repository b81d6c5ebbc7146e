from abc import ABC, abstractmethod
from typing import Optional

from appointment_service.common.dto import Doctor


class DoctorRepositoryPort(ABC):
    @abstractmethod
    async def get_doctor(self, name: str) -> Optional[Doctor]:
        pass
