"""
Core data structures and state management for Sound Button Board.

Modules:
- models: Immutable data structures (SoundButton, SoundBoard, AppState)
- repository: Board/button state manager with persistence on every mutation
- persistence: Key-value preference store and the board list codec
- settings: User settings file (~/.soundbutton/settings.json)
- log: Logging setup
- errors: Exception types
- constants: Store keys, defaults, palette
"""
