from fastapi import APIRouter

from cipherlab.api.v1.errors import ERROR_RESPONSES, check_text_length, cipher_errors
from cipherlab.dependencies import RegistryDep, SettingsDep
from cipherlab.models.schemas import CipherType, KeywordRequest, PlayfairResponse

router = APIRouter()


@router.post(
    "/encrypt",
    response_model=PlayfairResponse,
    responses=ERROR_RESPONSES,
    summary="Playfair encrypt",
    description="Encrypt text with a keyword-derived 5x5 square. Returns the square used.",
)
async def encrypt_playfair(
    request: KeywordRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> PlayfairResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.PLAYFAIR)

    with cipher_errors("Playfair encryption"):
        result = engine.encrypt(request.text, request.key)
        matrix = engine.build_key_square(engine.parse_key(request.key))

    return PlayfairResponse(result=result, matrix=matrix)


@router.post(
    "/decrypt",
    response_model=PlayfairResponse,
    responses=ERROR_RESPONSES,
    summary="Playfair decrypt",
    description=(
        "Decrypt text with a keyword-derived 5x5 square. 'result' has filler "
        "letters removed on a best-effort basis; 'raw' is the untouched output."
    ),
)
async def decrypt_playfair(
    request: KeywordRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> PlayfairResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.PLAYFAIR)

    with cipher_errors("Playfair decryption"):
        raw = engine.decrypt(request.text, request.key)
        matrix = engine.build_key_square(engine.parse_key(request.key))

    return PlayfairResponse(result=engine.clean_decrypted(raw), raw=raw, matrix=matrix)
