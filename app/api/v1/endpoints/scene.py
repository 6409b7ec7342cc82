from fastapi import APIRouter, HTTPException
from typing import Optional
from app.schemas import SceneCreateRequest, SceneView, TickRequest, PlanetRecord, PointerEvent
from app.services import SceneService

router = APIRouter()
scene_service = SceneService()


def _handle(operation, *args):
    """Run a scene operation, mapping core errors to HTTP errors"""
    try:
        return operation(*args)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0] if e.args else "Not found")
    except (ValueError, IndexError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/", response_model=SceneView, status_code=201)
async def create_scene(request: Optional[SceneCreateRequest] = None):
    """
    Create an animated system.

    Bodies are placed on circular orbits in roster order: the first body
    orbits closest to the star and fastest. Without planets, the built-in
    catalog is used; an empty planet list is rejected.
    """
    request = request or SceneCreateRequest()
    scene = _handle(scene_service.create_scene, request.planets, request.seed)
    return scene.view()

@router.get("/{scene_id}", response_model=SceneView)
async def get_scene(scene_id: str):
    """
    Current positions, pointer focus, cursor hint and selection of a scene.
    """
    return _handle(scene_service.view, scene_id)

@router.delete("/{scene_id}", status_code=204)
async def delete_scene(scene_id: str):
    _handle(scene_service.delete_scene, scene_id)

@router.post("/{scene_id}/tick", response_model=SceneView)
async def tick_scene(scene_id: str, request: Optional[TickRequest] = None):
    """
    Advance the scene by `frames` animation frames of `dt` each.
    """
    request = request or TickRequest()
    return _handle(scene_service.tick, scene_id, request.dt, request.frames)

@router.post("/{scene_id}/bodies", response_model=SceneView, status_code=201)
async def add_body(scene_id: str, planet: PlanetRecord):
    """
    Add a planet on the next free orbit.
    """
    return _handle(scene_service.add_planet, scene_id, planet)

@router.delete("/{scene_id}/bodies/{body_id}", response_model=SceneView)
async def remove_body(scene_id: str, body_id: int):
    """
    Remove a planet; the other planets keep their orbits.
    """
    return _handle(scene_service.remove_planet, scene_id, body_id)

# Pointer events
@router.post("/{scene_id}/pointer/enter", response_model=SceneView)
async def pointer_enter(scene_id: str, event: PointerEvent):
    return _handle(scene_service.enter, scene_id, event.body_id)

@router.post("/{scene_id}/pointer/leave", response_model=SceneView)
async def pointer_leave(scene_id: str, event: PointerEvent):
    return _handle(scene_service.leave, scene_id, event.body_id)

@router.post("/{scene_id}/pointer/capture-lost", response_model=SceneView)
async def pointer_capture_lost(scene_id: str, event: PointerEvent):
    return _handle(scene_service.capture_lost, scene_id, event.body_id)

@router.post("/{scene_id}/pointer/leave-all", response_model=SceneView)
async def pointer_leave_all(scene_id: str):
    return _handle(scene_service.leave_all, scene_id)

@router.post("/{scene_id}/pointer/select", response_model=SceneView)
async def pointer_select(scene_id: str, event: PointerEvent):
    """
    Click on a body; the scene keeps it as the body shown in the detail view.
    """
    return _handle(scene_service.select, scene_id, event.body_id)
