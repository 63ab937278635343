from fastapi import APIRouter

from cipherlab.api.v1.errors import ERROR_RESPONSES, check_text_length, cipher_errors
from cipherlab.dependencies import RegistryDep, SettingsDep
from cipherlab.models.schemas import (
    AffineCrackRequest,
    AffineRequest,
    CipherType,
    CrackResponse,
    TextResponse,
)

router = APIRouter()


@router.post(
    "/encrypt",
    response_model=TextResponse,
    responses=ERROR_RESPONSES,
    summary="Affine encrypt",
    description="Encrypt text with E(x) = (ax + b) mod 26. 'a' must be coprime with 26.",
)
async def encrypt_affine(
    request: AffineRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> TextResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.AFFINE)

    with cipher_errors("Affine encryption"):
        result = engine.encrypt(request.text, (request.a, request.b))

    return TextResponse(result=result)


@router.post(
    "/decrypt",
    response_model=TextResponse,
    responses=ERROR_RESPONSES,
    summary="Affine decrypt",
    description="Decrypt text with D(y) = a^(-1) * (y - b) mod 26.",
)
async def decrypt_affine(
    request: AffineRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> TextResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.AFFINE)

    with cipher_errors("Affine decryption"):
        result = engine.decrypt(request.text, (request.a, request.b))

    return TextResponse(result=result)


@router.post(
    "/crack",
    response_model=CrackResponse,
    responses=ERROR_RESPONSES,
    summary="Affine crack",
    description=(
        "Guess affine keys by assuming the most frequent ciphertext letters "
        "encrypt plain1 and plain2 (default E and T). Falls back to trying "
        "every key. Candidates are returned in generation order."
    ),
)
async def crack_affine(
    request: AffineCrackRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> CrackResponse:
    """
    Crack an affine ciphertext.

    The response lists candidates unranked; chi_squared is included so
    clients can apply their own ordering.
    """
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.AFFINE)

    with cipher_errors("Affine cracking"):
        candidates = engine.crack(
            request.text,
            plain1=request.plain1 or settings.crack_plain1,
            plain2=request.plain2 or settings.crack_plain2,
            top_k=settings.crack_top_k,
            max_candidates=settings.crack_max_candidates,
        )

    return CrackResponse(candidates=candidates)
