class WikimediaBadgesError(Exception):
    pass


class ConfigurationError(WikimediaBadgesError):
    """Raised when a setting is malformed. Never caught inside the package."""


class EntityLookupError(WikimediaBadgesError):
    def __init__(self, entity_id: str, message: str | None = None):
        self.entity_id = entity_id
        super().__init__(message or f"Entity {entity_id} could not be looked up")


class InvalidValueKindError(WikimediaBadgesError):
    def __init__(self, property_id: str, kind: str):
        self.property_id = property_id
        self.kind = kind
        super().__init__(
            f"Property {property_id} has a {kind} value, expected a string value"
        )
