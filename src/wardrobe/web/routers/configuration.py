"""Configuration endpoints.

Every endpoint works on the shared session while holding its lock, so
mutations are applied one at a time and reads never see a half-applied
change.
"""

from fastapi import APIRouter

from wardrobe.application import MutationResult, WardrobeConfigurator
from wardrobe.web.dependencies import SessionDep
from wardrobe.web.schemas.requests import (
    DimensionRequest,
    MaterialRequest,
    ModuleOverrideRequest,
)
from wardrobe.web.schemas.responses import (
    ConfigurationSchema,
    DimensionsSchema,
    ModuleSchema,
    MutationResponseSchema,
    SliderRangeSchema,
    SummarySchema,
)

router = APIRouter(prefix="/configuration", tags=["configuration"])


def _summary_schema(configurator: WardrobeConfigurator) -> SummarySchema:
    summary = configurator.summary
    return SummarySchema(
        total_width=summary.total_width,
        max_height=summary.max_height,
        max_depth=summary.max_depth,
        module_count=summary.module_count,
        counter_label=summary.counter_label,
    )


def _module_schemas(configurator: WardrobeConfigurator) -> list[ModuleSchema]:
    modules = []
    for view, module in zip(configurator.module_controls(), configurator.layout):
        modules.append(
            ModuleSchema(
                index=view.index,
                number=view.number,
                label=view.label,
                x=module.position.x,
                width=view.width,
                height=view.height,
                depth=view.depth,
                material=module.material,
                height_overridden=view.height_overridden,
                depth_overridden=view.depth_overridden,
                height_range=SliderRangeSchema(
                    min=view.height_range.minimum,
                    max=view.height_range.maximum,
                    step=view.height_range.step,
                ),
                depth_range=SliderRangeSchema(
                    min=view.depth_range.minimum,
                    max=view.depth_range.maximum,
                    step=view.depth_range.step,
                ),
            )
        )
    return modules


def _configuration_schema(configurator: WardrobeConfigurator) -> ConfigurationSchema:
    dims = configurator.store.dimensions
    return ConfigurationSchema(
        dimensions=DimensionsSchema(width=dims.width, height=dims.height, depth=dims.depth),
        material=configurator.store.material,
        summary=_summary_schema(configurator),
        modules=_module_schemas(configurator),
    )


def _mutation_response(
    configurator: WardrobeConfigurator, result: MutationResult
) -> MutationResponseSchema:
    return MutationResponseSchema(
        operation=result.operation,
        instructions=[str(instruction) for instruction in result.instructions],
        configuration=_configuration_schema(configurator),
    )


@router.get("", response_model=ConfigurationSchema)
async def get_configuration(session: SessionDep) -> ConfigurationSchema:
    """Get the current configuration, summary and modules."""
    with session.lock:
        return _configuration_schema(session.configurator)


@router.get("/summary", response_model=SummarySchema)
async def get_summary(session: SessionDep) -> SummarySchema:
    """Get the summary of the current layout."""
    with session.lock:
        return _summary_schema(session.configurator)


@router.get("/modules", response_model=list[ModuleSchema])
async def get_modules(session: SessionDep) -> list[ModuleSchema]:
    """Get the modules of the current layout in index order."""
    with session.lock:
        return _module_schemas(session.configurator)


@router.put("/width", response_model=MutationResponseSchema)
async def set_width(request: DimensionRequest, session: SessionDep) -> MutationResponseSchema:
    """Set the total width; the module count follows from it.

    Raises:
        InvalidDimension: If the width is not positive or exceeds the configured
            max_width (handled by exception handler).
    """
    session.factory.settings.check_width(request.value)
    with session.lock:
        configurator = session.configurator
        result = configurator.set_global_width(request.value)
        return _mutation_response(configurator, result)


@router.put("/height", response_model=MutationResponseSchema)
async def set_height(request: DimensionRequest, session: SessionDep) -> MutationResponseSchema:
    """Set the height of every module without a height override."""
    with session.lock:
        configurator = session.configurator
        result = configurator.set_global_height(request.value)
        return _mutation_response(configurator, result)


@router.put("/depth", response_model=MutationResponseSchema)
async def set_depth(request: DimensionRequest, session: SessionDep) -> MutationResponseSchema:
    """Set the depth of every module without a depth override."""
    with session.lock:
        configurator = session.configurator
        result = configurator.set_global_depth(request.value)
        return _mutation_response(configurator, result)


@router.put("/material", response_model=MutationResponseSchema)
async def set_material(request: MaterialRequest, session: SessionDep) -> MutationResponseSchema:
    """Switch the material of all modules."""
    with session.lock:
        configurator = session.configurator
        result = configurator.set_material(request.name)
        return _mutation_response(configurator, result)


@router.put("/modules/{index}", response_model=MutationResponseSchema)
async def set_module_override(
    index: int,
    request: ModuleOverrideRequest,
    session: SessionDep,
) -> MutationResponseSchema:
    """Override the height or depth of one module.

    Args:
        index: 0-based module index.
        request: Field and value to set.
        session: Injected configurator session.

    Raises:
        IndexOutOfRange: If no module has this index (404).
        UnsupportedOverrideField: If the field is not height or depth (422).
        InvalidDimension: If the value is outside the bounds (422).
    """
    with session.lock:
        configurator = session.configurator
        result = configurator.set_module_override(index, request.field, request.value)
        return _mutation_response(configurator, result)


@router.post("/reset", response_model=MutationResponseSchema)
async def reset_configuration(session: SessionDep) -> MutationResponseSchema:
    """Restore default dimensions and material and drop all overrides."""
    with session.lock:
        configurator = session.configurator
        result = configurator.reset()
        return _mutation_response(configurator, result)
