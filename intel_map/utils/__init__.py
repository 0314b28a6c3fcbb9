"""Pure helpers shared by the renderer: coordinates, colors and intel timing."""
