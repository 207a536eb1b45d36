""" Model for installed package information """
from pydantic import ConfigDict
from pydantic.dataclasses import dataclass


@dataclass(config=ConfigDict(validate_assignment=True))
class PackageModel:
    """Class representing an installed package"""
    name: str
    version: str
