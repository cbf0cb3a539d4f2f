#!/usr/bin/env python3
"""
Command-line client for the tasktrack REST API.
"""
import os
import sys
import json
import click
from typing import Optional, Dict, Any

from tasktrack.adapters import HTTPClientAdapterFactory, HTTPResponse, HTTPError, HTTPStatusError

DEFAULT_SERVICE_URL = "http://localhost:8080"


def get_service_url() -> str:
    """Get service URL from environment or default."""
    return os.getenv("TASKS_SERVICE_URL", DEFAULT_SERVICE_URL)


def make_request(
    method: str,
    endpoint: str,
    base_url: Optional[str] = None,
    **kwargs
) -> HTTPResponse:
    """Make HTTP request to the task service and raise on error status."""
    base_url = base_url or get_service_url()
    url = f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    with HTTPClientAdapterFactory.create_client(timeout=30.0) as client:
        if method.upper() == "GET":
            response = client.get(url, **kwargs)
        elif method.upper() == "POST":
            response = client.post(url, **kwargs)
        elif method.upper() == "PUT":
            response = client.put(url, **kwargs)
        elif method.upper() == "DELETE":
            response = client.delete(url, **kwargs)
        else:
            raise ValueError(f"Unsupported method: {method}")

        response.raise_for_status()
        return response


def format_task(task: Dict[str, Any]) -> str:
    """Format task for display."""
    lines = [
        f"Task #{task['id']}: {task['title']}",
        f"  Status: {task.get('status') or 'N/A'}",
    ]
    if task.get('createdAt'):
        lines.append(f"  Created: {task['createdAt']}")
    if task.get('description'):
        lines.append(f"  Description: {task['description']}")
    return "\n".join(lines)


def format_json(data: Any) -> str:
    """Format data as JSON."""
    return json.dumps(data, indent=2, default=str)


def fail(error: Exception) -> None:
    """Report a request failure on stderr and exit with status 1."""
    if isinstance(error, HTTPStatusError):
        detail = error.response.text.strip() or "Unknown error"
        click.echo(f"Error {error.response.status_code}: {detail}", err=True)
    else:
        click.echo(f"Error: {str(error)}", err=True)
    sys.exit(1)


@click.group()
@click.option('--url', envvar='TASKS_SERVICE_URL', default=None,
              help=f'Task service URL (default: {DEFAULT_SERVICE_URL})')
@click.pass_context
def cli(ctx, url):
    """tasktrack CLI tool for managing tasks."""
    ctx.ensure_object(dict)
    ctx.obj['url'] = url or get_service_url()


@cli.command(name='list')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
@click.pass_context
def list_tasks(ctx, output_format):
    """List all tasks."""
    try:
        tasks = make_request('GET', '/tasks', base_url=ctx.obj['url']).json()
    except (HTTPError, ValueError) as e:
        fail(e)

    if output_format == 'json':
        click.echo(format_json(tasks))
        return

    if not tasks:
        click.echo("No tasks found.")
        return

    for task in tasks:
        click.echo(format_task(task))
        click.echo()


@cli.command()
@click.option('--task-id', 'task_id', required=True, type=int, help='Task ID')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
@click.pass_context
def show(ctx, task_id, output_format):
    """Show task details."""
    try:
        task = make_request('GET', f'/tasks/{task_id}', base_url=ctx.obj['url']).json()
    except (HTTPError, ValueError) as e:
        fail(e)

    if output_format == 'json':
        click.echo(format_json(task))
    else:
        click.echo(format_task(task))


@cli.command()
@click.option('--title', required=True, help='Task title')
@click.option('--description', default='', help='Task description')
@click.option('--status', default='pending', help='Task status (default: pending)')
@click.pass_context
def create(ctx, title, description, status):
    """Create a new task."""
    data = {'title': title, 'description': description, 'status': status}
    try:
        task = make_request('POST', '/tasks', base_url=ctx.obj['url'], json=data).json()
    except (HTTPError, ValueError) as e:
        fail(e)

    click.echo("Task created successfully!")
    click.echo(format_task(task))


@cli.command()
@click.option('--task-id', 'task_id', required=True, type=int, help='Task ID')
@click.option('--title', help='New title')
@click.option('--description', help='New description')
@click.option('--status', help='New status')
@click.pass_context
def update(ctx, task_id, title, description, status):
    """Update a task. Fields not given keep their current value."""
    try:
        current = make_request('GET', f'/tasks/{task_id}', base_url=ctx.obj['url']).json()
        data = {
            'title': title if title is not None else current['title'],
            'description': description if description is not None else current.get('description', ''),
            'status': status if status is not None else current.get('status', ''),
        }
        task = make_request('PUT', f'/tasks/{task_id}', base_url=ctx.obj['url'], json=data).json()
    except (HTTPError, ValueError) as e:
        fail(e)

    click.echo(f"Task {task_id} updated successfully!")
    click.echo(format_task(task))


@cli.command()
@click.option('--task-id', 'task_id', required=True, type=int, help='Task ID')
@click.pass_context
def delete(ctx, task_id):
    """Delete a task."""
    try:
        make_request('DELETE', f'/tasks/{task_id}', base_url=ctx.obj['url'])
    except (HTTPError, ValueError) as e:
        fail(e)

    click.echo(f"Task {task_id} deleted")


if __name__ == '__main__':
    cli()
