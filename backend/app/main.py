from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from solver.engine import solve_polynomial_equation

app = FastAPI(title="Computor API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class EquationRequest(BaseModel):
    equation: str
    max_decimals: Optional[int] = Field(default=None, ge=0)


class StepInfo(BaseModel):
    description: str
    expression: str
    explanation: str


class SolutionInfo(BaseModel):
    kind: str
    roots: list[float]
    discriminant: Optional[float] = None


class SolveResponse(BaseModel):
    equation: str
    reduced_form: str
    degree: int
    coefficients: list[float]
    solution: SolutionInfo
    steps: list[StepInfo]
    final_answer: str
    verification_steps: list[StepInfo]


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: EquationRequest):
    equation = req.equation.strip()
    if not equation:
        raise HTTPException(status_code=400, detail="Equation cannot be empty.")

    try:
        result = solve_polynomial_equation(equation, req.max_decimals)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    return result
