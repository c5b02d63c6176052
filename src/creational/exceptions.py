class CreationalError(Exception):
    """Represent a base class for all creational failures.

    Catch this type when you want to handle any library error path without
    matching each concrete exception class individually.
    """


class InitializationFailedError(CreationalError):
    """Signal that a lazily created shared instance could not be built.

    Raised by ``LazySingleton.get`` and ``LazySingleton.aget`` when the
    factory raises. The original exception is chained as ``__cause__``.

    The holder stays uninitialized, so a later call retries construction.
    Typical fixes include passing valid initialization arguments or making the
    factory tolerate the current environment.
    """


class InvalidRegistrationError(CreationalError):
    """Signal invalid variant registration.

    Raised by ``VariantRegistry.register`` for empty names and for names that
    are already registered.

    Typical fixes include choosing a unique, non-empty variant name.
    """


class VariantNotRegisteredError(CreationalError):
    """Signal that a variant name has no registered constructor.

    Raised by ``VariantRegistry.get`` and the helpers built on it, such as
    ``creator_for`` and ``family_for``, including when the name comes from
    ``CREATIONAL_FACTORY_VARIANT``.

    Typical fixes include registering the variant before lookup or correcting
    the configured variant name.
    """


class BuilderNotSetError(CreationalError):
    """Signal use of a ``Director`` before a builder is assigned.

    Typical fix is passing ``builder=...`` to ``Director`` or assigning
    ``director.builder`` before running a construction sequence.
    """
