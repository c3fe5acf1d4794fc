from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.submission_payload import SubmissionPayload


class RegistrationPort(ABC):
    @abstractmethod
    async def create_point(self, payload: SubmissionPayload) -> None:
        """
        Create a collection point.

        Any 2xx answer is success and the response body is not consumed.
        Raises UpstreamServiceError on failure.
        """
        raise NotImplementedError
