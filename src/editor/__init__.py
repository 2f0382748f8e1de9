"""
Incremental lexing for a code editor.

The controller keeps a display surface's lexed lines up to date as the text
changes and the viewport moves, lexing lazily around the viewport and sweeping
up the rest when the editor goes idle.
"""

from editor.display_surface import DisplaySurface
from editor.editor_controller import EditorController
from editor.editor_exceptions import EditorClosedError, EditorError, EditorSettingsError
from editor.editor_settings import EditorSettings
from editor.idle_task import IdleTask
from editor.line import Line
from editor.line_cache import LineCache
from editor.position_vector import PositionVector
from editor.render_mode import RenderMode
from editor.render_scheduler import RenderResult, RenderScheduler, RenderStats
from editor.selection import Selection

__all__ = [
    'DisplaySurface',
    'EditorClosedError',
    'EditorController',
    'EditorError',
    'EditorSettings',
    'EditorSettingsError',
    'IdleTask',
    'Line',
    'LineCache',
    'PositionVector',
    'RenderMode',
    'RenderResult',
    'RenderScheduler',
    'RenderStats',
    'Selection',
]
