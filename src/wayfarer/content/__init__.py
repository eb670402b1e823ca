from .demo import DemoWorld, build_demo_world, intro_cutscene

__all__ = ["DemoWorld", "build_demo_world", "intro_cutscene"]
