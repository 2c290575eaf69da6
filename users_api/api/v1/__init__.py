from .users_controller import router as users_router
from .fallback_controller import router as fallback_router


__all__ = ["users_router", "fallback_router"]
