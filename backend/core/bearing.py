"""
Target bearing calculator factory.

The shot model defaults to the planar bearing of the reference behaviour.
The great-circle initial bearing is available for ranges where the planar
approximation drifts.
"""

from abc import ABC, abstractmethod
from typing import Dict, Type

from core.calculations import calculate_initial_bearing, calculate_target_bearing
from core.models.geo import PointLike
from core.validation import InvalidInput


class BearingCalculator(ABC):
    """Abstract base class for target bearing calculations."""

    @abstractmethod
    def bearing(self, origin: PointLike, target: PointLike) -> float:
        """
        Bearing from origin to target.

        Returns:
            Bearing in radians, clockwise from north
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the method."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of the method."""
        pass


class PlanarBearingCalculator(BearingCalculator):
    """Flat-earth atan2(delta_lon, delta_lat); valid over a single hole."""

    def bearing(self, origin: PointLike, target: PointLike) -> float:
        return calculate_target_bearing(origin, target)

    @property
    def name(self) -> str:
        return "Planar"

    @property
    def description(self) -> str:
        return "Flat-earth approximation without longitude scaling, for single-hole ranges"


class GreatCircleBearingCalculator(BearingCalculator):
    """Initial bearing along the great circle."""

    def bearing(self, origin: PointLike, target: PointLike) -> float:
        return calculate_initial_bearing(origin, target)

    @property
    def name(self) -> str:
        return "Great circle"

    @property
    def description(self) -> str:
        return "Spherical initial bearing, accurate at any range"


class BearingCalculatorFactory:
    """Factory for creating bearing calculators."""

    _calculators: Dict[str, Type[BearingCalculator]] = {
        'planar': PlanarBearingCalculator,
        'great_circle': GreatCircleBearingCalculator,
    }

    @classmethod
    def create(cls, method: str) -> BearingCalculator:
        """
        Create a bearing calculator for the specified method.

        Raises:
            InvalidInput: If method is not supported
        """
        method_lower = (method or '').lower()
        if method_lower not in cls._calculators:
            raise InvalidInput(
                f"Unknown bearing method '{method}'. Available: {sorted(cls._calculators)}"
            )
        return cls._calculators[method_lower]()

    @classmethod
    def get_available_methods(cls) -> Dict[str, str]:
        """Get available bearing methods with descriptions."""
        result = {}
        for method_name, calculator_class in cls._calculators.items():
            calculator = calculator_class()
            result[method_name] = f"{calculator.name}: {calculator.description}"
        return result

    @classmethod
    def get_default_method(cls) -> str:
        return 'planar'
