# seximal/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (time literals, time zones, config).
    Should NOT print traceback.
    """
