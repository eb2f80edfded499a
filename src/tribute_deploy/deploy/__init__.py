"""Deployment phases of a Tribute DAO."""

from .dao import DeploymentResult, clone_dao, deploy_dao
from .voting import VotingHelpers

__all__ = ["DeploymentResult", "VotingHelpers", "clone_dao", "deploy_dao"]
