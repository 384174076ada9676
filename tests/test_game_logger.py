import json

from wordle.utils.game_logger import game_logger


def test_game_events_are_json_lines_counted_by_stats():
    before = game_logger.get_log_stats().get('game_event', 0)

    game_logger.log_game_event('logged-game', 'hint_used', row=2)
    for handler in game_logger.logger.handlers:
        handler.flush()

    stats = game_logger.get_log_stats()
    assert stats['game_event'] == before + 1

    with open(stats['log_file'], encoding='utf-8') as f:
        last = f.read().strip().splitlines()[-1]
    entry = json.loads(last.split(' | ', 2)[2])
    assert entry['event_type'] == 'GAME_EVENT'
    assert entry['action'] == 'hint_used'
    assert entry['user']['user_ip'] == 'system'
    assert entry['details'] == {'game_id': 'logged-game', 'row': 2}


def test_unfinished_answer_never_logged():
    summary = game_logger._summarize_response({'success': True, 'state': {'answer': None, 'current_row': 1}})
    assert summary['state']['answer_revealed'] is False
    assert 'answer' not in summary['state']
