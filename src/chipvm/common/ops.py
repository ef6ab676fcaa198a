from enum import Enum, auto


class Op(Enum):
    # Flow
    CLS = auto()        # 00E0 clear display
    RET = auto()        # 00EE PC <- [--SP]
    JP = auto()         # 1nnn PC <- nnn
    CALL = auto()       # 2nnn [SP++] <- PC + 2; PC <- nnn
    JP_V0 = auto()      # Bnnn PC <- nnn + V0

    # Skips
    SE_BYTE = auto()    # 3xkk skip if Vx == kk
    SNE_BYTE = auto()   # 4xkk skip if Vx != kk
    SE_REG = auto()     # 5xy0 skip if Vx == Vy
    SNE_REG = auto()    # 9xy0 skip if Vx != Vy
    SKP = auto()        # Ex9E skip if key Vx down
    SKNP = auto()       # ExA1 skip if key Vx up

    # Loads
    LD_BYTE = auto()    # 6xkk Vx <- kk
    LD_REG = auto()     # 8xy0 Vx <- Vy
    LD_I = auto()       # Annn I <- nnn
    LD_VX_DT = auto()   # Fx07 Vx <- DT
    LD_KEY = auto()     # Fx0A Vx <- next key press
    LD_DT = auto()      # Fx15 DT <- Vx
    LD_ST = auto()      # Fx18 ST <- Vx
    LD_F = auto()       # Fx29 I <- glyph(Vx)
    LD_BCD = auto()     # Fx33 M[I..I+2] <- BCD(Vx)
    LD_MEM = auto()     # Fx55 M[I..I+x] <- V0..Vx
    LD_REGS = auto()    # Fx65 V0..Vx <- M[I..I+x]

    # Arithmetic
    ADD_BYTE = auto()   # 7xkk Vx <- Vx + kk
    OR = auto()         # 8xy1 Vx <- Vx | Vy
    AND = auto()        # 8xy2 Vx <- Vx & Vy
    XOR = auto()        # 8xy3 Vx <- Vx ^ Vy
    ADD_REG = auto()    # 8xy4 Vx <- Vx + Vy; VF <- carry
    SUB = auto()        # 8xy5 Vx <- Vx - Vy; VF <- not borrow
    SHR = auto()        # 8xy6 Vx <- src >> 1; VF <- lsb
    SUBN = auto()       # 8xy7 Vx <- Vy - Vx; VF <- not borrow
    SHL = auto()        # 8xyE Vx <- src << 1; VF <- msb
    ADD_I = auto()      # Fx1E I <- I + Vx

    # Misc
    RND = auto()        # Cxkk Vx <- random & kk
    DRW = auto()        # Dxyn draw sprite M[I..I+n] at (Vx, Vy); VF <- collision


# Low nibble selectors of the 8xyN group
ALU_OPS = {
    0x0: Op.LD_REG,
    0x1: Op.OR,
    0x2: Op.AND,
    0x3: Op.XOR,
    0x4: Op.ADD_REG,
    0x5: Op.SUB,
    0x6: Op.SHR,
    0x7: Op.SUBN,
    0xE: Op.SHL,
}

# Low byte selectors of the ExNN group
KEY_OPS = {
    0x9E: Op.SKP,
    0xA1: Op.SKNP,
}

# Low byte selectors of the FxNN group
MISC_OPS = {
    0x07: Op.LD_VX_DT,
    0x0A: Op.LD_KEY,
    0x15: Op.LD_DT,
    0x18: Op.LD_ST,
    0x1E: Op.ADD_I,
    0x29: Op.LD_F,
    0x33: Op.LD_BCD,
    0x55: Op.LD_MEM,
    0x65: Op.LD_REGS,
}

# High nibble selectors of the single-form groups
NNN_OPS = {
    0x1: Op.JP,
    0x2: Op.CALL,
    0xA: Op.LD_I,
    0xB: Op.JP_V0,
}

XKK_OPS = {
    0x3: Op.SE_BYTE,
    0x4: Op.SNE_BYTE,
    0x6: Op.LD_BYTE,
    0x7: Op.ADD_BYTE,
    0xC: Op.RND,
}
