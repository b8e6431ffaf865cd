from pydantic import BaseModel, Field

# scipy.optimize.brentq rejects rtol below 4 * machine epsilon
_MIN_RELATIVE_TOLERANCE = 4 * 2.220446049250313e-16

# --- SOLVER MODELS ---

class SolverSettings(BaseModel):
    absolute_tolerance: float = Field(1e-12, gt=0.0)
    relative_tolerance: float = Field(1e-15, ge=_MIN_RELATIVE_TOLERANCE)
    max_iterations: int = Field(100, ge=1)
    # Sub-brackets scanned when the end points do not change sign
    bracket_divisions: int = Field(16, ge=2)
    max_bracket_expansions: int = Field(20, ge=0)

# --- PROCESS MODELS ---

class ProcessSettings(BaseModel):
    # Upper search limit for heating towards a target RH (degC)
    heating_temperature_limit_c: float = Field(200.0, gt=0.0, le=200.0)
    # Pressure drops below this are treated as zero (Pa)
    pressure_accuracy_pa: float = Field(1e-6, ge=0.0)
    # Relative half-width of the cooling power bracket around its closed-form estimate
    cooling_bracket_margin: float = Field(0.05, gt=0.0, lt=1.0)

# --- ROOT ---

class EngineConfig(BaseModel):
    solver: SolverSettings = Field(default_factory=SolverSettings)
    processes: ProcessSettings = Field(default_factory=ProcessSettings)
