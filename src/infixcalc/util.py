from functools import wraps


class CalcError(Exception):
    '''
    Base of every error the calculator recovers from.

    The first argument is the human readable reason shown after "Error: ".
    '''

    @property
    def reason(self):
        return self.args[0] if self.args else type(self).__name__


class CalcSyntaxError(CalcError):
    pass


class EvalError(CalcError):
    pass


class InvalidExpression(CalcError):
    pass


class ExpressionTooLong(CalcError):
    pass


def wrap_user_errors(fmt, error=EvalError):
    '''
    Decorator that converts stray exceptions to calculator errors.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
