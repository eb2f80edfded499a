"""Exceptions raised while deploying and wiring Tribute DAO contracts."""

from typing import Optional


class DeploymentError(Exception):
    """Base exception for every failure of a deployment run."""


class ConfigurationError(DeploymentError):
    """A contract, option or parameter needed by the run is missing or invalid."""


class MissingArgumentError(ConfigurationError):
    """A deployment argument named by a descriptor is absent from the options."""

    def __init__(self, argument: str, contract: str, location: Optional[str] = None):
        self.argument = argument
        self.contract = contract
        where = location or contract
        super().__init__(f"Missing deployment argument <{argument}> for {where}")


class LinkageError(ConfigurationError):
    """A factory points at an extension descriptor that does not exist."""

    def __init__(self, factory: str, extension_id: Optional[str]):
        self.factory = factory
        self.extension_id = extension_id
        super().__init__(
            f"Missing extension config <{extension_id}> generated by {factory}"
        )


class ChainCallError(DeploymentError):
    """A deployment, call or transaction was rejected by the chain."""

    def __init__(self, contract: str, function: str, reason: str):
        self.contract = contract
        self.function = function
        self.reason = reason
        super().__init__(f"{contract}.{function} failed: {reason}")
