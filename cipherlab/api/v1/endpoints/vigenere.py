from fastapi import APIRouter

from cipherlab.api.v1.errors import ERROR_RESPONSES, check_text_length, cipher_errors
from cipherlab.dependencies import RegistryDep, SettingsDep
from cipherlab.models.schemas import CipherType, KeywordRequest, TextResponse

router = APIRouter()


@router.post(
    "/encrypt",
    response_model=TextResponse,
    responses=ERROR_RESPONSES,
    summary="Vigenère encrypt",
    description="Encrypt text with a repeating keyword. Case and non-letters are preserved.",
)
async def encrypt_vigenere(
    request: KeywordRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> TextResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.VIGENERE)

    with cipher_errors("Vigenère encryption"):
        result = engine.encrypt(request.text, request.key)

    return TextResponse(result=result)


@router.post(
    "/decrypt",
    response_model=TextResponse,
    responses=ERROR_RESPONSES,
    summary="Vigenère decrypt",
    description="Decrypt text with a repeating keyword.",
)
async def decrypt_vigenere(
    request: KeywordRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> TextResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.VIGENERE)

    with cipher_errors("Vigenère decryption"):
        result = engine.decrypt(request.text, request.key)

    return TextResponse(result=result)
