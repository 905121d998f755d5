import json

from telekit.constants import ParseMode
from telekit.poll import Poll, PollOption, PollType


def test_poll_kinds():
    assert Poll(type=PollType.REGULAR).is_regular()
    assert Poll(type=PollType.QUIZ).is_quiz()
    assert not Poll(type=PollType.QUIZ).is_regular()


def test_add_options():
    p = Poll()
    opts = [PollOption(text="Option 1"), PollOption(text="Option 2")]
    p.add_options(opts[0].text, opts[1].text)
    assert p.options == opts


def test_poll_type_marshals_as_object():
    data = json.dumps(PollType.QUIZ.to_dict(), separators=(",", ":"))
    assert data == '{"type":"quiz"}'


def test_close_date_round_trip():
    p = Poll(close_unixdate=1700000000)
    assert p.close_date().timestamp() == 1700000000


def test_send_params_with_explanation_and_close_date():
    p = Poll(
        type=PollType.QUIZ,
        question="Test Poll",
        explanation="Explanation",
        parse_mode=ParseMode.HTML,
        close_unixdate=100,
    )
    p.add_options("1", "2")
    params = p.send_params()
    assert params["type"] == "quiz"
    assert params["question"] == "Test Poll"
    assert params["is_closed"] == "false"
    assert params["explanation"] == "Explanation"
    assert params["explanation_parse_mode"] == "HTML"
    assert params["close_date"] == "100"
    assert json.loads(params["options"]) == ["1", "2"]


def test_send_params_open_period_wins_over_close_date():
    p = Poll(open_period=5, close_unixdate=100, anonymous=True)
    params = p.send_params()
    assert params["open_period"] == "5"
    assert "close_date" not in params
    assert "explanation" not in params
    assert params["is_anonymous"] == "true"