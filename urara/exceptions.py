class InvalidArgument(ValueError): pass
class PreconditionViolation(RuntimeError): pass
