class SerializerRegistrationConflict(Exception):
    pass


class SerializerNotFound(Exception):
    pass
