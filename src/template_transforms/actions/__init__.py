from .transform_actions import TransformActions, ActionResult

__all__ = ['TransformActions', 'ActionResult']
