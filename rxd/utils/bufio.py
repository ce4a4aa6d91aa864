import logging

logger = logging.getLogger(__name__)


class BoundedReader:
    """
    Chunked reader over a byte source that never hands out more than `limit`
    bytes in total.

    fill() returning 0 means the input is exhausted or the limit was reached.
    Read errors from the source are treated as end of input: a truncated or
    failing source is indistinguishable from a short one.
    """

    def __init__(self, chunk_capacity, source, limit=None):
        if chunk_capacity < 1:
            raise ValueError("chunk capacity must be at least 1, got %d" % chunk_capacity)
        self._capacity = chunk_capacity
        self._source = source
        self._limit = limit
        self._consumed = 0
        self._chunk = b""

    def _remaining(self):
        if self._limit is None:
            return None
        return max(0, self._limit - self._consumed)

    def fill(self):
        remaining = self._remaining()
        if remaining == 0:
            self._chunk = b""
            return 0

        request = self._capacity if remaining is None else min(self._capacity, remaining)
        try:
            data = self._source.read(request)
        except (OSError, ValueError) as e:
            logger.warning("Read failed after %d bytes, treating as end of input: %s", self._consumed, e)
            data = b""

        if data is None:
            # non-blocking source with nothing available
            data = b""
        if remaining is not None and len(data) > remaining:
            data = data[:remaining]

        self._chunk = bytes(data)
        self._consumed += len(self._chunk)
        if remaining is not None and self._consumed >= self._limit:
            logger.debug("Byte limit of %d reached", self._limit)
        return len(self._chunk)

    def snapshot(self):
        return self._chunk

    def total_consumed(self):
        return self._consumed

    def chunks(self):
        while self.fill():
            yield self._chunk

    def rows(self, columns):
        """
        Yield rows of exactly `columns` bytes, regardless of how the source
        splits its reads. Only the last row may be shorter; an empty
        remainder yields nothing.
        """
        carry = bytearray()
        for chunk in self.chunks():
            start = 0
            if carry:
                start = min(columns - len(carry), len(chunk))
                carry += chunk[:start]
                if len(carry) < columns:
                    continue
                yield bytes(carry)
                carry.clear()
            end = start + (len(chunk) - start) // columns * columns
            for i in range(start, end, columns):
                yield chunk[i:i + columns]
            carry += chunk[end:]
        if carry:
            yield bytes(carry)
