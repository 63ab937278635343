from fastapi import APIRouter

from cipherlab.api.v1.errors import ERROR_RESPONSES, check_text_length, cipher_errors
from cipherlab.dependencies import RegistryDep, SettingsDep
from cipherlab.models.schemas import CipherType, KeywordRequest, TextResponse

router = APIRouter()


@router.post(
    "/encrypt",
    response_model=TextResponse,
    responses=ERROR_RESPONSES,
    summary="Monoalphabetic encrypt",
    description="Encrypt text with a 26-letter permutation key. Case and non-letters are preserved.",
)
async def encrypt_mono(
    request: KeywordRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> TextResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.MONOALPHABETIC)

    with cipher_errors("Monoalphabetic encryption"):
        result = engine.encrypt(request.text, request.key)

    return TextResponse(result=result)


@router.post(
    "/decrypt",
    response_model=TextResponse,
    responses=ERROR_RESPONSES,
    summary="Monoalphabetic decrypt",
    description="Decrypt text with a 26-letter permutation key.",
)
async def decrypt_mono(
    request: KeywordRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> TextResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.MONOALPHABETIC)

    with cipher_errors("Monoalphabetic decryption"):
        result = engine.decrypt(request.text, request.key)

    return TextResponse(result=result)
