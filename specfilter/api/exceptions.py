"""specfilter exceptions"""


class SpecFilterError(Exception):
    """Base exception for specfilter"""
    pass


class SpecificationTypeError(SpecFilterError, TypeError):
    """Specifications over incompatible item types were combined"""
    pass


class SpecificationNotFoundError(SpecFilterError):
    """Requested specification not found"""
    pass


class InvalidCriterionError(SpecFilterError, ValueError):
    """A filter criterion could not be interpreted"""
    pass


class ConfigurationError(SpecFilterError):
    """Configuration error"""
    pass


class CatalogError(SpecFilterError):
    """Failed to read products from a catalog file"""
    pass
