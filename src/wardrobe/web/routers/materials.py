"""Material listing endpoint."""

from fastapi import APIRouter

from wardrobe.web.dependencies import ServiceFactoryDep
from wardrobe.web.schemas.responses import MaterialListSchema, MaterialSchema

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=MaterialListSchema)
async def list_materials(factory: ServiceFactoryDep) -> MaterialListSchema:
    """List the available materials and their finishes."""
    materials = [
        MaterialSchema(
            name=finish.name,
            color=finish.hex_color,
            metalness=finish.metalness,
            roughness=finish.roughness,
        )
        for finish in factory.get_finishes().values()
    ]
    return MaterialListSchema(
        materials=materials,
        default=factory.settings.default_material,
    )
