from enum import Enum


class Outcome(str, Enum):
    """Result of a catalog or circulation operation.

    Rejections never raise; callers get one of these back and the state is
    left as it was.
    """

    OK = "ok"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    LIMIT_REACHED = "limit_reached"
    UNAVAILABLE = "unavailable"
    ALREADY_CHECKED_OUT = "already_checked_out"
    NOT_CHECKED_OUT = "not_checked_out"
    COPIES_ON_LOAN = "copies_on_loan"
    LIMIT_BELOW_CHECKED_OUT = "limit_below_checked_out"

    @property
    def ok(self) -> bool:
        return self is Outcome.OK

    def message(self, subject: str = "") -> str:
        return _MESSAGES[self].format(subject=subject)


_MESSAGES = {
    Outcome.OK: "Done.",
    Outcome.INVALID_INPUT: "Invalid input.",
    Outcome.NOT_FOUND: "The book: {subject} is not from this library!",
    Outcome.LIMIT_REACHED: "Sorry, you have reached your checkout limit. Please return a book to check out another.",
    Outcome.UNAVAILABLE: "Sorry the book: {subject} is currently unavailable for checkout.",
    Outcome.ALREADY_CHECKED_OUT: "You already have the book: {subject} checked out.",
    Outcome.NOT_CHECKED_OUT: "You didn't check out the book: {subject}!",
    Outcome.COPIES_ON_LOAN: "Can't remove book: {subject} there are copies currently checked out.",
    Outcome.LIMIT_BELOW_CHECKED_OUT: "Checkout limit can't be lower than the number of books checked out.",
}
