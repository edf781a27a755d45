class InvalidArgument(ValueError):
    '''
    Represents a rejected input while building or mutating a sentinel configuration.
    The first argument of this exception should be the offending value
    (or the name of the missing argument), and the optional second argument
    describes why it was rejected.
    '''

    def __str__(self):
        if len(self.args) > 1:
            return f'Invalid argument: {self.args[0]!r} ({self.args[1]})'
        if self.args:
            return f'Invalid argument: {self.args[0]!r}'
        return 'Invalid argument'
