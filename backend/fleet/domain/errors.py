class DriverNotFound(LookupError):
    def __init__(self, driver_id: int):
        super().__init__(f"driver {driver_id} not found")
        self.driver_id = driver_id

class DriverIdMismatch(ValueError):
    def __init__(self, path_id: int, body_id: int | None):
        super().__init__(f"path id {path_id} != body id {body_id}")
        self.path_id = path_id
        self.body_id = body_id

class InvalidAttachment(ValueError):
    pass

class AttachmentTooLarge(ValueError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"attachment of {size} bytes exceeds {limit} bytes")
        self.size = size
        self.limit = limit

class AttachmentMissing(LookupError):
    pass
