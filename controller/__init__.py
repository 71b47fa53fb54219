"""Controller module for the track simulation.

Contains the simulation session and the turn logger.
"""

from controller.simulation_session import SimulationSession
from controller.turn_logger import TurnLogger

__all__ = ["SimulationSession", "TurnLogger"]
