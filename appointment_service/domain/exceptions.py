class AppointmentServiceException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAppointmentException(AppointmentServiceException):
    pass


class AppointmentNotFoundException(AppointmentServiceException):
    pass


class DoctorNotFoundException(AppointmentNotFoundException):
    def __init__(self, message: str = "Doctor not found"):
        super().__init__(message)


class SlotAlreadyBookedException(AppointmentServiceException):
    pass
