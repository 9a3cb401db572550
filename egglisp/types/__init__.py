from egglisp.types.errors import (
    EggError,
    EggSyntaxError,
    EggNameError,
    EggDuplicateDefinitionError,
    EggArityError,
    EggTypeError,
    EggArgumentError,
    EggNotCallableError,
    EggRecursionError,
)
from egglisp.types.nil import Nil, NilType
from egglisp.types.symbol import Symbol
from egglisp.types.pair import Pair
from egglisp.types.quoted import Quoted
from egglisp.types.environment import Environment
from egglisp.types.native import NativeFunction, NativeSpecialForm
from egglisp.types.lambda_fn import Closure, Macro
