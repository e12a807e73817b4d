"""Tests for the command line entrypoint."""

import json

import pytest

import main


def test_generate_then_layout(tmp_path, capsys):
    roster = tmp_path / "roster.json"
    out_dir = tmp_path / "out"
    config = tmp_path / "missing.yaml"
    
    main.main(['generate-roster', '--roster', str(roster), '--date', '2024-06-12T09:00:00', '--config', str(config)])
    assert roster.exists()
    
    main.main([
        'layout',
        '--roster', str(roster),
        '--date', '2024-06-12',
        '--config', str(config),
        '--output-dir', str(out_dir),
        '--zoom', '1.5',
    ])
    
    layouts = list(out_dir.glob("layout_*.json"))
    logs = list(out_dir.glob("layout_*.log"))
    assert len(layouts) == 1
    assert len(logs) == 1
    
    data = json.loads(layouts[0].read_text())
    assert data['window']['start'].startswith('2024-06-10')
    assert data['grid']['day_width_pixels'] == 150
    assert data['policy_name'] == 'RELEVANCE'
    assert all(lane['expanded'] for lane in data['lanes'])
    
    output = capsys.readouterr().out
    assert "Layout completed using RELEVANCE ordering" in output


def test_layout_collapsed_with_input_policy(tmp_path):
    roster = tmp_path / "roster.json"
    roster.write_text(json.dumps([
        {'userId': 1, 'userName': 'An', 'tasks': [
            {'taskId': 1, 'taskKey': 'WEB-1', 'status': 'todo', 'createdAt': '2024-06-11', 'dueDate': '2024-06-12'},
        ]},
        {'userId': 2, 'userName': 'Binh', 'tasks': []},
    ]))
    
    layout = main.run_layout(
        None,
        str(roster),
        policy_name='input',
        reference_date=main.parse_timestamp('2024-06-12'),
        collapsed=True,
        output_dir=str(tmp_path / "out"),
    )
    
    assert [lane.user_id for lane in layout.lanes] == [1, 2]
    assert layout.total_rows == 2
    assert all(not lane.bars for lane in layout.lanes)


def test_invalid_zoom_propagates(tmp_path):
    roster = tmp_path / "roster.json"
    roster.write_text("[]")
    with pytest.raises(ValueError):
        main.main(['layout', '--roster', str(roster), '--zoom', '3', '--output-dir', str(tmp_path / "out"),
                   '--config', str(tmp_path / "missing.yaml")])


def test_missing_roster(tmp_path):
    with pytest.raises(FileNotFoundError):
        main.main(['layout', '--roster', str(tmp_path / "none.json"), '--config', str(tmp_path / "missing.yaml")])
