from fastapi import APIRouter

from cipherlab.api.v1.endpoints import affine, euclid, hill, mono, playfair, vigenere

api_router = APIRouter()

api_router.include_router(
    affine.router,
    prefix="/affine",
    tags=["Affine"],
)

api_router.include_router(
    mono.router,
    prefix="/mono",
    tags=["Monoalphabetic"],
)

api_router.include_router(
    vigenere.router,
    prefix="/vigenere",
    tags=["Vigenère"],
)

api_router.include_router(
    playfair.router,
    prefix="/playfair",
    tags=["Playfair"],
)

api_router.include_router(
    hill.router,
    prefix="/hill",
    tags=["Hill"],
)

api_router.include_router(
    euclid.router,
    prefix="/euclid",
    tags=["Modular Arithmetic"],
)
