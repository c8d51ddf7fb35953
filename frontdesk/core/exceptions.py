"""Error types shaped after RFC 9457 Problem Details, without the HTTP transport."""

from typing import Any, Dict, List, Optional


class FrontDeskError(Exception):
    """
    Base exception for the front-desk core.

    Carries a Problem Details style payload so a presentation layer can
    render it without knowing the concrete exception class.
    """

    def __init__(
        self,
        title: str,
        detail: Optional[str] = None,
        type_uri: Optional[str] = None,
        code: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the error.

        Args:
            title: Short, human-readable summary of the problem type
            detail: Human-readable explanation specific to this occurrence
            type_uri: URI reference that identifies the problem type
            code: Application-specific error code
            extensions: Additional problem-specific information
        """
        self.title = title
        self.detail = detail
        self.type_uri = type_uri or "about:blank"
        self.code = code
        self.extensions = extensions or {}

        self.problem_details: Dict[str, Any] = {
            "type": self.type_uri,
            "title": self.title,
        }
        if self.detail:
            self.problem_details["detail"] = self.detail
        if self.code:
            self.problem_details["code"] = self.code
        self.problem_details.update(self.extensions)

        super().__init__(detail or title)


class ValidationError(FrontDeskError):
    """Raised when a value cannot be folded into an entity."""

    def __init__(
        self,
        detail: str = "The submitted data failed validation",
        violations: Optional[List[Any]] = None,
    ):
        self.violations = list(violations or [])
        extensions = {}
        if self.violations:
            extensions["violations"] = [
                v.model_dump() if hasattr(v, "model_dump") else v for v in self.violations
            ]
        super().__init__(
            title="Validation Error",
            detail=detail,
            type_uri="https://example.com/problems/validation-error",
            code="VALIDATION_FAILED",
            extensions=extensions,
        )


class NotFoundError(FrontDeskError):
    """Raised when a referenced entity does not exist."""

    def __init__(
        self,
        resource_type: str = "resource",
        resource_id: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        if not detail:
            detail = f"The requested {resource_type}"
            if resource_id:
                detail += f" with ID '{resource_id}'"
            detail += " could not be found"

        extensions: Dict[str, Any] = {"resource_type": resource_type}
        if resource_id:
            extensions["resource_id"] = resource_id

        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            title="Resource Not Found",
            detail=detail,
            type_uri="https://example.com/problems/resource-not-found",
            code="NOT_FOUND",
            extensions=extensions,
        )


class ConflictError(FrontDeskError):
    """Raised when a mutation conflicts with the current state of the store."""

    def __init__(
        self,
        detail: str = "The request conflicts with the current state of the resource",
        conflicting_resource: Optional[Dict[str, Any]] = None,
        code: str = "CONFLICT",
    ):
        extensions = {}
        if conflicting_resource:
            extensions["conflicting_resource"] = conflicting_resource

        self.conflicting_resource = conflicting_resource or {}
        super().__init__(
            title="Resource Conflict",
            detail=detail,
            type_uri="https://example.com/problems/resource-conflict",
            code=code,
            extensions=extensions,
        )


# Business logic exceptions

class DuplicateRoomCodeError(ConflictError):
    """Exception when a room id or room code is already in use."""

    def __init__(self, room_code: str, room_id: str):
        super().__init__(
            detail=f"Room code '{room_code}' (id {room_id}) is already registered",
            conflicting_resource={"room_code": room_code, "room_id": room_id},
            code="DUPLICATE_ROOM",
        )


class RoomInUseError(ConflictError):
    """Exception when a room still holds an active stay."""

    def __init__(self, room_code: str, booking_ids: List[str]):
        super().__init__(
            detail=f"Room {room_code} is held by active bookings: {', '.join(booking_ids)}",
            conflicting_resource={"room_code": room_code, "booking_ids": booking_ids},
            code="ROOM_IN_USE",
        )


class RoomUnavailableError(ConflictError):
    """Exception when a room cannot be assigned to a booking."""

    def __init__(self, room_code: str, customer_id: str):
        super().__init__(
            detail=f"Room {room_code} is not available for booking {customer_id}",
            conflicting_resource={"room_code": room_code, "customer_id": customer_id},
            code="ROOM_UNAVAILABLE",
        )


class UnknownFieldError(ValidationError):
    """Exception when an edit targets a field the entity does not have."""

    def __init__(self, entity: str, field_name: str):
        self.entity = entity
        self.field_name = field_name
        super().__init__(detail=f"{entity} has no editable field '{field_name}'")
