import sui_bcs as bcs

# CallArg
PURE = 0
OBJECT = 1
# ObjectArg
IMM_OR_OWNED_OBJECT = 0
SHARED_OBJECT = 1
# Argument
INPUT = 1
RESULT = 2
# Command
MOVE_CALL = 0
# TransactionKind
PROGRAMMABLE_TRANSACTION = 0
# TransactionData
TRANSACTION_DATA_V1 = 0
# TransactionExpiration
NO_EXPIRATION = 0


def owned_object_arg(object_id, version, digest):
    return bcs.uleb128(IMM_OR_OWNED_OBJECT) + bcs.object_ref(object_id, version, digest)


def shared_object_arg(object_id, initial_shared_version, mutable=True):
    return (bcs.uleb128(SHARED_OBJECT) + bcs.address(object_id)
            + bcs.u64(int(initial_shared_version)) + bcs.boolean(mutable))


class TransactionBlock:
    def __init__(self):
        self.inputs = []
        self.commands = []
        self.gas_budget = None

    def set_gas_budget(self, budget):
        self.gas_budget = budget

    def _add_input(self, call_arg):
        self.inputs.append(call_arg)
        return bcs.uleb128(INPUT) + bcs.u16(len(self.inputs) - 1)

    def pure(self, value):
        return self._add_input(bcs.uleb128(PURE) + bcs.byte_vector(value))

    def object(self, object_arg):
        return self._add_input(bcs.uleb128(OBJECT) + object_arg)

    def move_call(self, target, arguments=(), type_arguments=()):
        package, module, function = target.split('::')
        command = (bcs.uleb128(MOVE_CALL) + bcs.address(package)
                   + bcs.string(module) + bcs.string(function)
                   + bcs.vector(type_arguments, bcs.type_tag)
                   + bcs.vector(arguments, bytes))
        self.commands.append(command)
        return bcs.uleb128(RESULT) + bcs.u16(len(self.commands) - 1)

    def build(self, sender, gas_payment, gas_price):
        if self.gas_budget is None:
            raise ValueError('gas budget is not set')
        if not gas_payment:
            raise ValueError('gas payment is empty')
        kind = (bcs.uleb128(PROGRAMMABLE_TRANSACTION)
                + bcs.vector(self.inputs, bytes)
                + bcs.vector(self.commands, bytes))
        gas_data = (bcs.vector(gas_payment, bytes) + bcs.address(sender)
                    + bcs.u64(int(gas_price)) + bcs.u64(int(self.gas_budget)))
        return (bcs.uleb128(TRANSACTION_DATA_V1) + kind + bcs.address(sender)
                + gas_data + bcs.uleb128(NO_EXPIRATION))
