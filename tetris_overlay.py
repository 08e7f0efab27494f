import pygame

class Overlay:
    """Start / pause / game-over panels drawn over the board."""
    def __init__(self):
        self.start_visible=True
        self.pause_visible=False
        self.game_over_visible=False
        self.final_score=0

    def show_pause(self,visible): self.pause_visible=visible

    def show_game_over(self,visible,final_score):
        self.game_over_visible=visible; self.final_score=final_score
        if visible: self.start_visible=False

    def hide_start(self): self.start_visible=False

    def lines(self):
        if self.game_over_visible:
            return ["GAME OVER",f"Score: {self.final_score}","R / Enter to restart"]
        if self.pause_visible:
            return ["PAUSED","Space to resume"]
        if self.start_visible:
            return ["NEON TETRIS","Enter to start"]
        return []

    def draw(self,screen,big_font,font,rect):
        text=self.lines()
        if not text: return
        s=pygame.Surface(rect.size,pygame.SRCALPHA); s.fill((5,5,16,200))
        screen.blit(s,rect.topleft)
        y=rect.centery-40
        for i,line in enumerate(text):
            f=big_font if i==0 else font
            surf=f.render(line,True,(255,220,230) if i==0 else (200,210,235))
            screen.blit(surf,surf.get_rect(center=(rect.centerx,y))); y+=40 if i==0 else 26
