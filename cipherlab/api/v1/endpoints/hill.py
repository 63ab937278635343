from fastapi import APIRouter

from cipherlab.api.v1.errors import ERROR_RESPONSES, check_text_length, cipher_errors
from cipherlab.dependencies import RegistryDep, SettingsDep
from cipherlab.models.schemas import CipherType, HillRequest, HillResponse

router = APIRouter()


@router.post(
    "/encrypt",
    response_model=HillResponse,
    responses=ERROR_RESPONSES,
    summary="Hill encrypt",
    description=(
        "Encrypt text with a 2x2 or 3x3 key matrix mod 26. Padding letters are "
        "appended in lowercase. 'inverse' is null when the key cannot decrypt."
    ),
)
async def encrypt_hill(
    request: HillRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> HillResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.HILL)

    with cipher_errors("Hill encryption"):
        result = engine.encrypt(request.text, request.key_matrix)
        inverse = engine.try_inverse_matrix(request.key_matrix)

    return HillResponse(result=result, inverse=inverse)


@router.post(
    "/decrypt",
    response_model=HillResponse,
    responses=ERROR_RESPONSES,
    summary="Hill decrypt",
    description="Decrypt text with the inverse of a 2x2 or 3x3 key matrix mod 26.",
)
async def decrypt_hill(
    request: HillRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> HillResponse:
    check_text_length(request.text, settings)
    engine = registry.get_engine(CipherType.HILL)

    with cipher_errors("Hill decryption"):
        inverse = engine.inverse_matrix(request.key_matrix)
        result = engine.decrypt(request.text, request.key_matrix)

    return HillResponse(result=result, inverse=inverse)
