class DIDeclareError(Exception):
    """Represent a base class for all dideclare-specific failures.

    Catch this type when you want to handle any declarative configuration
    failure without matching each concrete exception class individually.
    """


class DIDeclareNoContractError(DIDeclareError):
    """Signal that an implementation type has no contract to be registered under.

    Raised by ``ContractResolver.resolve`` (and therefore by
    ``configure_declaratively``) when a marker omits ``provides`` and the
    marked type introduces no contract of its own. Contracts already
    implemented by the type's base class do not count.

    Typical fixes include passing an explicit contract
    (``@service_implementation(SomeContract)``), making the class implement a
    contract directly, or flagging a plain base class with ``@contract``.
    """


class DIDeclareScopeLoadError(DIDeclareError):
    """Signal that a requested scope cannot be inspected.

    Raised before any type is scanned when a dotted module name cannot be
    imported, when a package submodule fails to import, or when the scope
    object is neither a module nor a module name. The underlying ``ImportError``
    is chained as ``__cause__``.

    Typical fixes include correcting the module path or fixing the import
    error in the scanned module.
    """


class DIDeclareInvalidLifetimeError(DIDeclareError):
    """Signal a lifetime value outside the ``Lifetime`` enumeration.

    Raised when a marker is built with a lifetime that is not a ``Lifetime``
    member, and again by the registrar before forwarding a registration.

    Typical fix is using ``Lifetime.SINGLETON``, ``Lifetime.SCOPED`` or
    ``Lifetime.TRANSIENT``.
    """


class DIDeclareInvalidDeclarationError(DIDeclareError):
    """Signal a malformed declaration.

    Raised when ``service_implementation`` decorates something that is not a
    class, when a ``Lifetime`` is passed where a contract is expected, and by
    ``DeclaredTypeMetadata`` for duplicate entries, references to undeclared
    types or contracts, and cyclic contract extension.
    """
