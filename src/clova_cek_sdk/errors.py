"""Exceptions raised by request verification and dispatch."""


class ClovaError(Exception):
    """Base class for SDK errors."""


class VerificationError(ClovaError):
    """Inbound request failed signature or application id verification."""


class MissingSignatureError(VerificationError):
    def __init__(self) -> None:
        super().__init__("Missing signature.")


class MissingApplicationIdError(VerificationError):
    def __init__(self) -> None:
        super().__init__("Missing applicationId.")


class MissingRequestBodyError(VerificationError):
    def __init__(self) -> None:
        super().__init__("Missing requestBody.")


class InvalidSignatureError(VerificationError):
    """Signature does not match the request body."""

    def __init__(self, signature: str) -> None:
        self.signature = signature
        super().__init__(f'Invalid signature: "{signature}".')


class MalformedPayloadError(VerificationError):
    """Signed body is not a JSON object."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed requestBody: {reason}.")


class InvalidApplicationIdError(VerificationError):
    """Payload is addressed to another extension."""

    def __init__(self, application_id: str) -> None:
        self.application_id = application_id
        super().__init__(f"Invalid application id: {application_id}.")


class HandlerNotFoundError(ClovaError):
    """No handler registered for the request type."""

    def __init__(self, request_type: str) -> None:
        self.request_type = request_type
        super().__init__(f"Unable to find requestHandler for '{request_type}'")
