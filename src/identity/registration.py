"""User registration through the authentication service."""

from identity.auth.port import IdentityService
from shared.handler import EndpointHandler
from shared.outcome import DownstreamOutcome
from shared.translation import EndpointKind
from shared.validation import ValidationResult, validate_identity

MISSING_USER_ID = "Please provide a non-empty userId in the body"


class CreateUser(EndpointHandler):
    kind = EndpointKind.CREATE_USER
    validation_message = MISSING_USER_ID

    def __init__(self, service: IdentityService, request) -> None:
        super().__init__()
        self.service = service
        self.request = request

    def validate(self) -> ValidationResult:
        return validate_identity(self.request)

    def entity_id(self) -> str | None:
        user_id = getattr(self.request, "user_id", None)
        return user_id.strip() if user_id else None

    def call_downstream(self) -> DownstreamOutcome:
        return self.service.create_user(self.entity_id())
