"""Shared fixtures: synthetic AtCoder pages shaped like the live site."""

import os

import pytest

from atcoder_client.config import TestingConfig


def pytest_collection_modifyitems(config, items):
    if os.environ.get('ATCODER_LIVE_TESTS') == '1':
        return
    skip_network = pytest.mark.skip(reason='set ATCODER_LIVE_TESTS=1 to hit atcoder.jp')
    for item in items:
        if 'network' in item.keywords:
            item.add_marker(skip_network)


def _page(body):
    return f"""<!DOCTYPE html>
<html>
<head><title>AtCoder</title></head>
<body>
<div id="main-container" class="container">
{body}
</div>
</body>
</html>
"""


def _submission_row(sid=6433251, time='2019-07-21 22:39:50+0900', contest_id='abc134',
                    problem_id='abc134_a', problem_title='A - Dodecagon', user_id='tourist',
                    language='C++14 (GCC 5.4.1)', point='100', length='180 Byte',
                    result='AC', exec_time='2 ms', memory='256 KB'):
    language_cell = (
        f"<td><a href='/contests/{contest_id}/submissions?f.Language=3003'>{language}</a></td>"
        if language else '<td></td>'
    )
    if result == 'CE':
        # Compile errors span the status, time and memory columns
        result_cells = (
            "<td class='text-center' colspan='3'>"
            "<span class='label label-warning'>CE</span></td>"
        )
    else:
        result_cells = (
            f"<td class='text-center'><span class='label label-success'>{result}</span></td>"
            f"<td class='text-right'>{exec_time}</td>"
            f"<td class='text-right'>{memory}</td>"
        )
    return f"""<tr>
<td class="no-break"><time class='fixtime fixtime-second'>{time}</time></td>
<td><a href='/contests/{contest_id}/tasks/{problem_id}'>{problem_title}</a></td>
<td><a href='/users/{user_id}'>{user_id}</a> <a href='/contests/{contest_id}/submissions?f.User={user_id}'><span class='glyphicon glyphicon-search' aria-hidden='true'></span></a></td>
{language_cell}
<td class="text-right submission-score" data-id="{sid}">{point}</td>
<td class="text-right">{length}</td>
{result_cells}
<td class="text-center"><a href='/contests/{contest_id}/submissions/{sid}'>Detail</a></td>
</tr>"""


def _submissions_page(rows, max_page=None, contest_id='abc134'):
    pagination = ''
    if max_page:
        pages = sorted({1, 2, 3, max_page} & set(range(1, max_page + 1)))
        links = ''.join(
            f"<li><a href='/contests/{contest_id}/submissions?page={p}'>{p}</a></li>"
            for p in pages
        )
        pagination = f'<ul class="pagination pagination-sm mt-0 mb-1">{links}</ul>'
    return _page(f"""
<a href='/contests/{contest_id}/submissions?page=9999&amp;f.Task=abc134_a'>filtered</a>
{pagination}
<div class="table-responsive">
<table class="table table-bordered table-striped small th-center">
<thead>
<tr><th>Submission Time</th><th>Task</th><th>User</th><th>Language</th><th>Score</th>
<th>Code Size</th><th>Status</th><th>Exec Time</th><th>Memory</th><th></th></tr>
</thead>
<tbody>
{''.join(rows)}
</tbody>
</table>
</div>
{pagination}
""")


def _contest_row(contest_id='abc134', title='AtCoder Beginner Contest 134',
                 start='2019-07-20 21:00:00+0900', duration='01:40', rated=' - 1999'):
    return f"""<tr>
<td class="text-center"><a href='http://www.timeanddate.com/worldclock/fixedtime.html?iso=20190720T2100&amp;p1=248' target='blank'><time class='fixtime fixtime-full'>{start}</time></a></td>
<td><span class="h4"><span aria-hidden='true' title="Algorithm">&#9398;</span> <span class="user-blue">&#9673;</span></span> <a href="/contests/{contest_id}">{title}</a></td>
<td class="text-center">{duration}</td>
<td class="text-center">{rated}</td>
</tr>"""


def _contest_page(rows):
    return _page(f"""
<div class="table-responsive">
<table class="table table-default table-striped table-hover table-condensed table-bordered small">
<thead><tr><th>Start Time</th><th>Contest Name</th><th>Duration</th><th>Rated Range</th></tr></thead>
<tbody>
{''.join(rows)}
</tbody>
</table>
</div>
<ul class="pagination pagination-sm mt-0 mb-1"><li><a href='/contests/archive?lang=ja&amp;page=2'>2</a></li></ul>
""")


def _task_row(contest_id, problem_id, position, title):
    return f"""<tr>
<td class="text-center no-break"><a href='/contests/{contest_id}/tasks/{problem_id}'>{position}</a></td>
<td><a href='/contests/{contest_id}/tasks/{problem_id}'>{title}</a></td>
<td class="text-right">2 sec</td>
<td class="text-right">1024 MB</td>
<td class="text-center"><a href='/contests/{contest_id}/submit?taskScreenName={problem_id}'>Submit</a></td>
</tr>"""


def _task_page(rows):
    return _page(f"""
<div class="panel panel-default table-responsive">
<table class="table table-bordered table-striped">
<thead><tr><th width="3%"></th><th>Task Name</th><th>Time Limit</th><th>Memory Limit</th><th></th></tr></thead>
<tbody>
{''.join(rows)}
</tbody>
</table>
</div>
""")


@pytest.fixture()
def config():
    return TestingConfig()


@pytest.fixture()
def make_submission_row():
    return _submission_row


@pytest.fixture()
def make_submissions_page():
    return _submissions_page


@pytest.fixture()
def make_contest_row():
    return _contest_row


@pytest.fixture()
def make_contest_page():
    return _contest_page


@pytest.fixture()
def submissions_html():
    """A full listing page: 20 rows, pagination up to page 818."""
    rows = [
        _submission_row(sid=6433251 - i, user_id=f'user{i}', problem_id=f'abc134_{"abcdef"[i % 6]}')
        for i in range(20)
    ]
    return _submissions_page(rows, max_page=818)


@pytest.fixture()
def contests_html():
    rows = [_contest_row(contest_id=f'abc{134 - i}', title=f'AtCoder Beginner Contest {134 - i}')
            for i in range(50)]
    return _contest_page(rows)


@pytest.fixture()
def tasks_html():
    rows = [
        _task_row('abc107', 'arc101_a' if pos == 'C' else f'abc107_{pos.lower()}', pos, title)
        for pos, title in [('A', 'Train'), ('B', 'Grid Compression'),
                           ('C', 'Candles'), ('D', 'Median of Medians')]
    ]
    return _task_page(rows)


@pytest.fixture()
def submission_detail_html():
    return _page("""
<div class="col-sm-12">
<p><span class="h3">Submission #14924462</span></p>
<pre id="submission-code" class="prettyprint linenums">#include &lt;bits/stdc++.h&gt;
int main() { return 0; }
</pre>
</div>
""")
