"""
Run a tiny hand-assembled CHIP-8 program headlessly and print the screen.

The program counts V0 up once per frame (using the delay timer as a 60Hz
clock) and redraws its value as three decimal digits.
"""

from chip8vm import Session
from chip8vm.logging import SessionLogger


def assemble(*words):
    return b"".join(word.to_bytes(2, "big") for word in words)


COUNTER_ROM = assemble(
    0x00E0,  # 200: clear screen
    0xA300,  # 202: I = 0x300
    0xF033,  # 204: BCD of V0 -> [I..I+2]
    0xF265,  # 206: V0..V2 = [I..I+2]  (clobbers V0, restored below)
    0x6300,  # 208: V3 = x
    0x6400,  # 20A: V4 = y
    0xF029,  # 20C: I = glyph(V0)
    0xD345,  # 20E: draw hundreds
    0x7305,  # 210: x += 5
    0xF129,  # 212: I = glyph(V1)
    0xD345,  # 214: draw tens
    0x7305,  # 216: x += 5
    0xF229,  # 218: I = glyph(V2)
    0xD345,  # 21A: draw ones
    0x6501,  # 21C: V5 = 1
    0xF515,  # 21E: delay = 1
    0xF607,  # 220: V6 = delay
    0x3600,  # 222: skip next if V6 == 0
    0x1220,  # 224: wait for the timer
    0x7701,  # 226: V7 += 1 (the real counter)
    0x8070,  # 228: V0 = V7
    0x1200,  # 22A: loop
)


def ascii_screen(session: Session) -> str:
    pixels = session.framebuffer("#", ".").reshape(32, 64)
    return "\n".join("".join(row) for row in pixels)


if __name__ == "__main__":
    session = Session(COUNTER_ROM, cycles_per_frame=16, logger=SessionLogger(log_level="INFO"))
    drawn = session.run_frames(120, show_progress=True)
    print(f"{drawn} of 120 frames drew, {session.cycles_run} cycles")
    print(ascii_screen(session))
