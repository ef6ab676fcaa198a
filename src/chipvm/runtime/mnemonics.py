''' Instruction -> assembly text '''

from chipvm.common.ops import Op
from chipvm.runtime.decoder import Instruction


def _vx(instr: Instruction) -> str:
    return f'V{instr.x:X}'


def _vy(instr: Instruction) -> str:
    return f'V{instr.y:X}'


FORMATS = {
    Op.CLS: lambda i: 'CLS',
    Op.RET: lambda i: 'RET',
    Op.JP: lambda i: f'JP #{i.nnn:03X}',
    Op.CALL: lambda i: f'CALL #{i.nnn:03X}',
    Op.JP_V0: lambda i: f'JP V0, #{i.nnn:03X}',

    Op.SE_BYTE: lambda i: f'SE {_vx(i)}, #{i.kk:02X}',
    Op.SNE_BYTE: lambda i: f'SNE {_vx(i)}, #{i.kk:02X}',
    Op.SE_REG: lambda i: f'SE {_vx(i)}, {_vy(i)}',
    Op.SNE_REG: lambda i: f'SNE {_vx(i)}, {_vy(i)}',
    Op.SKP: lambda i: f'SKP {_vx(i)}',
    Op.SKNP: lambda i: f'SKNP {_vx(i)}',

    Op.LD_BYTE: lambda i: f'LD {_vx(i)}, #{i.kk:02X}',
    Op.LD_REG: lambda i: f'LD {_vx(i)}, {_vy(i)}',
    Op.LD_I: lambda i: f'LD I, #{i.nnn:03X}',
    Op.LD_VX_DT: lambda i: f'LD {_vx(i)}, DT',
    Op.LD_KEY: lambda i: f'LD {_vx(i)}, K',
    Op.LD_DT: lambda i: f'LD DT, {_vx(i)}',
    Op.LD_ST: lambda i: f'LD ST, {_vx(i)}',
    Op.LD_F: lambda i: f'LD F, {_vx(i)}',
    Op.LD_BCD: lambda i: f'LD B, {_vx(i)}',
    Op.LD_MEM: lambda i: f'LD [I], {_vx(i)}',
    Op.LD_REGS: lambda i: f'LD {_vx(i)}, [I]',

    Op.ADD_BYTE: lambda i: f'ADD {_vx(i)}, #{i.kk:02X}',
    Op.OR: lambda i: f'OR {_vx(i)}, {_vy(i)}',
    Op.AND: lambda i: f'AND {_vx(i)}, {_vy(i)}',
    Op.XOR: lambda i: f'XOR {_vx(i)}, {_vy(i)}',
    Op.ADD_REG: lambda i: f'ADD {_vx(i)}, {_vy(i)}',
    Op.SUB: lambda i: f'SUB {_vx(i)}, {_vy(i)}',
    Op.SUBN: lambda i: f'SUBN {_vx(i)}, {_vy(i)}',
    Op.SHR: lambda i: f'SHR {_vx(i)}, {_vy(i)}',
    Op.SHL: lambda i: f'SHL {_vx(i)}, {_vy(i)}',
    Op.ADD_I: lambda i: f'ADD I, {_vx(i)}',

    Op.RND: lambda i: f'RND {_vx(i)}, #{i.kk:02X}',
    Op.DRW: lambda i: f'DRW {_vx(i)}, {_vy(i)}, {i.n}',
}


def render(instr: Instruction) -> str:
    return FORMATS[instr.op](instr)
