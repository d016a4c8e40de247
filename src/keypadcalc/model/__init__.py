"""
The MODEL layer contains pure data structures and the calculator logic.
It has NO knowledge of the GUI (Qt).
"""
from keypadcalc.model.evaluator import Operator, evaluate
from keypadcalc.model.state import CalculatorState, INITIAL_STATE

__all__ = ["Operator", "evaluate", "CalculatorState", "INITIAL_STATE"]
