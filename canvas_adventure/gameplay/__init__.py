"""
Gameplay logic for Canvas Adventure.
NO UI DEPENDENCIES - everything here can be tested without pygame.
"""
