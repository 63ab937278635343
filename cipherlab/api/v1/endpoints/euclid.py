from fastapi import APIRouter

from cipherlab.api.v1.errors import ERROR_RESPONSES, cipher_errors
from cipherlab.models.schemas import Coefficients, EuclidRequest, EuclidResponse
from cipherlab.services.arithmetic import euclid

router = APIRouter()


@router.post(
    "",
    response_model=EuclidResponse,
    responses=ERROR_RESPONSES,
    summary="Extended Euclid",
    description=(
        "gcd(a, m) with Bezout coefficients x, y such that a*x + m*y = gcd, "
        "and the inverse of a mod m when it exists."
    ),
)
async def extended_euclid(request: EuclidRequest) -> EuclidResponse:
    with cipher_errors("Extended Euclid"):
        result = euclid(request.a, request.m)

    return EuclidResponse(
        gcd=result.gcd,
        inverse=result.inverse,
        coefficients=Coefficients(x=result.x, y=result.y),
    )
