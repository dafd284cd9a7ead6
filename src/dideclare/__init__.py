from dideclare.configuration import DeclarativeConfigurator, configure_declaratively
from dideclare.contracts import ContractPolicy, contract
from dideclare.declared_metadata import DeclaredTypeMetadata
from dideclare.exceptions import (
    DIDeclareError,
    DIDeclareInvalidDeclarationError,
    DIDeclareInvalidLifetimeError,
    DIDeclareNoContractError,
    DIDeclareScopeLoadError,
)
from dideclare.lifetime import Lifetime
from dideclare.markers import ServiceImplementation, get_markers, service_implementation
from dideclare.metadata import TypeMetadataProvider
from dideclare.registrar import Registrar
from dideclare.resolver import ContractResolver
from dideclare.runtime_metadata import RuntimeTypeMetadata
from dideclare.scanner import TypeScanner
from dideclare.services import ServiceCollection, ServiceContainer, ServiceDescriptor

__all__ = [
    "ContractPolicy",
    "ContractResolver",
    "DIDeclareError",
    "DIDeclareInvalidDeclarationError",
    "DIDeclareInvalidLifetimeError",
    "DIDeclareNoContractError",
    "DIDeclareScopeLoadError",
    "DeclarativeConfigurator",
    "DeclaredTypeMetadata",
    "Lifetime",
    "Registrar",
    "RuntimeTypeMetadata",
    "ServiceCollection",
    "ServiceContainer",
    "ServiceDescriptor",
    "ServiceImplementation",
    "TypeMetadataProvider",
    "TypeScanner",
    "configure_declaratively",
    "contract",
    "get_markers",
    "service_implementation",
]
